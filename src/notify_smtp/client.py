"""SMTP mail client backed by aiosmtplib."""

from __future__ import annotations

import email.message
import logging

import aiosmtplib

from .addresses import message_recipients
from .exceptions import ProviderConfigurationError
from .options import SmtpProviderOptions
from .ports.client import ISmtpClient

logger = logging.getLogger(__name__)


class AiosmtplibClient(ISmtpClient):
    """
    Async SMTP mail client using aiosmtplib.

    Opens one connection per message. ``use_ssl`` upgrades the connection
    with STARTTLS; credentials are only sent when a username is configured.
    """

    def __init__(self, options: SmtpProviderOptions):
        if not options.server:
            raise ProviderConfigurationError("SMTP server is not configured.")
        self._options = options

    @classmethod
    def create(cls, options: SmtpProviderOptions) -> AiosmtplibClient:
        """Create a client from provider options."""
        return cls(options)

    @property
    def options(self) -> SmtpProviderOptions:
        return self._options

    async def send_message(self, message: email.message.EmailMessage) -> None:
        async with aiosmtplib.SMTP(
            hostname=self._options.server,
            port=self._options.port,
            timeout=self._options.timeout,
            use_tls=False,
            start_tls=self._options.use_ssl,
        ) as smtp:
            if self._options.username:
                await smtp.login(self._options.username, self._options.password or "")

            await smtp.send_message(message)

        logger.info(
            f"Email sent to {message_recipients(message)} "
            f"via {self._options.server}:{self._options.port}"
        )
