"""SMTP email provider for pluggable notification dispatchers."""

from __future__ import annotations

from .client import AiosmtplibClient
from .constants import FROM_ADDRESS_REQUIRED, PROVIDER_NAME
from .exceptions import (
    InvalidAddressError,
    NotificationError,
    NotifySmtpError,
    ProviderConfigurationError,
)
from .extensions import send_email_with_smtp
from .memory.console import ConsoleSmtpClient
from .memory.fake import InMemorySmtpClient
from .message import EmailMessage, MessageParameters
from .options import SmtpProviderOptions
from .ports.client import ISmtpClient
from .ports.notification import INotification
from .provider import NotificationProvider
from .result import NotificationResult
from .smtp import SmtpProvider

__all__ = [
    "AiosmtplibClient",
    "ConsoleSmtpClient",
    "EmailMessage",
    "FROM_ADDRESS_REQUIRED",
    "INotification",
    "ISmtpClient",
    "InMemorySmtpClient",
    "InvalidAddressError",
    "MessageParameters",
    "NotificationError",
    "NotificationProvider",
    "NotificationResult",
    "NotifySmtpError",
    "PROVIDER_NAME",
    "ProviderConfigurationError",
    "SmtpProvider",
    "SmtpProviderOptions",
    "send_email_with_smtp",
]
