"""Dispatcher helpers for the SMTP provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import PROVIDER_NAME

if TYPE_CHECKING:
    from .message import EmailMessage
    from .ports.notification import INotification
    from .result import NotificationResult


async def send_email_with_smtp(
    notification: INotification, message: EmailMessage
) -> NotificationResult:
    """Send *message* through the dispatcher's ``"smtp"`` provider."""
    return await notification.send(PROVIDER_NAME, message.to_parameters())
