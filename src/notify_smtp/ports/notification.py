"""Dispatcher port used by the convenience helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..result import NotificationResult


@runtime_checkable
class INotification(Protocol):
    """
    Notification dispatcher that routes parameters to a provider by name.
    """

    async def send(self, provider_name: str, parameters: Mapping[str, str]) -> NotificationResult:
        """Send *parameters* through the provider registered as *provider_name*."""
        ...
