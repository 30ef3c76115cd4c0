"""Ports for the SMTP provider."""

from __future__ import annotations

from .client import ISmtpClient
from .notification import INotification

__all__ = [
    "INotification",
    "ISmtpClient",
]
