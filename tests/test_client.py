"""Tests for the aiosmtplib-backed mail client."""

from __future__ import annotations

import email.message
import email.policy
import logging
from unittest.mock import AsyncMock, MagicMock

import aiosmtplib
import pytest

from notify_smtp.client import AiosmtplibClient
from notify_smtp.exceptions import ProviderConfigurationError
from notify_smtp.options import SmtpProviderOptions
from notify_smtp.ports.client import ISmtpClient


@pytest.fixture
def smtp_connection(monkeypatch):
    """Patch aiosmtplib.SMTP with an async context manager mock."""
    connection = MagicMock()
    connection.__aenter__.return_value = connection
    connection.login = AsyncMock()
    connection.send_message = AsyncMock()
    smtp_cls = MagicMock(return_value=connection)
    monkeypatch.setattr(aiosmtplib, "SMTP", smtp_cls)
    return smtp_cls, connection


def _message() -> email.message.EmailMessage:
    message = email.message.EmailMessage()
    message["From"] = "sender@example.com"
    message["To"] = "user@example.com"
    message.set_content("hello")
    return message


def test_client_satisfies_port(smtp_options):
    """Test AiosmtplibClient is an ISmtpClient."""
    assert isinstance(AiosmtplibClient.create(smtp_options), ISmtpClient)


def test_client_requires_server():
    """Test a missing server is rejected at construction."""
    with pytest.raises(ProviderConfigurationError):
        AiosmtplibClient(SmtpProviderOptions())


@pytest.mark.asyncio
async def test_send_message_connects_with_options(smtp_options, smtp_connection):
    """Test connection settings come from the options."""
    smtp_cls, connection = smtp_connection
    client = AiosmtplibClient.create(smtp_options)
    message = _message()

    await client.send_message(message)

    smtp_cls.assert_called_once_with(
        hostname="smtp.example.com",
        port=587,
        timeout=30.0,
        use_tls=False,
        start_tls=True,
    )
    connection.login.assert_awaited_once_with("mailer", "secret")
    connection.send_message.assert_awaited_once_with(message)


@pytest.mark.asyncio
async def test_send_message_skips_login_without_username(smtp_connection):
    """Test no credentials are sent when no username is configured."""
    smtp_cls, connection = smtp_connection
    client = AiosmtplibClient(SmtpProviderOptions(server="localhost", port=25))

    await client.send_message(_message())

    assert smtp_cls.call_args.kwargs["start_tls"] is False
    connection.login.assert_not_awaited()
    connection.send_message.assert_awaited_once()


@pytest.mark.asyncio
async def test_send_message_propagates_transport_errors(smtp_options, smtp_connection):
    """Test SMTP errors are raised, not swallowed."""
    _, connection = smtp_connection
    connection.send_message.side_effect = aiosmtplib.SMTPRecipientsRefused([])
    client = AiosmtplibClient(smtp_options)

    with pytest.raises(aiosmtplib.SMTPRecipientsRefused):
        await client.send_message(_message())


@pytest.mark.asyncio
async def test_send_message_logs_bcc_only_recipients(smtp_options, smtp_connection, caplog):
    """Test the delivery log lists recipients even without a To header."""
    caplog.set_level(logging.INFO, logger="notify_smtp.client")
    message = email.message.EmailMessage(policy=email.policy.default)
    message["From"] = "sender@example.com"
    message["Bcc"] = "hidden@example.com"
    message.set_content("hello")

    await AiosmtplibClient(smtp_options).send_message(message)

    assert "['hidden@example.com']" in caplog.text
    assert "None" not in caplog.text
