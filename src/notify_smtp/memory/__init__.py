"""In-memory and console mail clients for tests and local development."""

from __future__ import annotations

from .console import ConsoleSmtpClient
from .fake import InMemorySmtpClient

__all__ = ["ConsoleSmtpClient", "InMemorySmtpClient"]
