"""Exception hierarchy for the SMTP provider."""

from __future__ import annotations


class NotifySmtpError(Exception):
    """Root exception for the notify-smtp package."""


class NotificationError(NotifySmtpError):
    """Base exception for notification provider failures."""


class InvalidAddressError(NotificationError, ValueError):
    """Raised when an email address cannot be parsed."""

    def __init__(self, address: str, reason: str | None = None):
        self.address = address
        self.reason = reason
        msg = f"Invalid email address: {address!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ProviderConfigurationError(NotificationError):
    """Raised when a provider or mail client is built without usable configuration."""
