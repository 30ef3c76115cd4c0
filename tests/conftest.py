"""Test configuration for notify-smtp."""

from __future__ import annotations

import pytest

from notify_smtp.memory.fake import InMemorySmtpClient
from notify_smtp.message import EmailMessage
from notify_smtp.options import SmtpProviderOptions


@pytest.fixture
def smtp_options() -> SmtpProviderOptions:
    """Options with a configured default sender."""
    return SmtpProviderOptions(
        server="smtp.example.com",
        port=587,
        username="mailer",
        password="secret",
        use_ssl=True,
        default_from_address="noreply@example.com",
    )


@pytest.fixture
def smtp_client() -> InMemorySmtpClient:
    """In-memory client whose options carry no default sender."""
    return InMemorySmtpClient()


@pytest.fixture
def email_message() -> EmailMessage:
    """Sample message with an explicit sender."""
    return EmailMessage(
        from_address="sender@example.com",
        to_addresses=["user@example.com"],
        subject="Test Email",
    )
