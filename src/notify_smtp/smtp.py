"""SMTP notification provider."""

from __future__ import annotations

import email.message
import email.policy
import logging
from collections.abc import Mapping

from .addresses import parse_address
from .client import AiosmtplibClient
from .constants import FROM_ADDRESS_REQUIRED, PROVIDER_NAME
from .exceptions import ProviderConfigurationError
from .message import EmailMessage
from .options import SmtpProviderOptions
from .ports.client import ISmtpClient
from .provider import NotificationProvider
from .result import NotificationResult


class SmtpProvider(NotificationProvider):
    """
    Notification provider that delivers email through an SMTP mail client.

    Translates the generic parameter map into an :class:`EmailMessage`,
    builds a stdlib message from it and awaits the client. Transport errors
    are not caught; the dispatcher decides what a failed delivery means.

    Example:
        ```python
        provider = SmtpProvider.from_options(
            SmtpProviderOptions(
                server="smtp.example.com",
                use_ssl=True,
                default_from_address="noreply@example.com",
            )
        )
        message = EmailMessage(to_addresses=["user@example.com"], subject="Hi")
        result = await provider.send(message.to_parameters())
        ```
    """

    options: SmtpProviderOptions

    def __init__(
        self,
        options: SmtpProviderOptions | None = None,
        client: ISmtpClient | None = None,
        logger: logging.Logger | None = None,
    ):
        if client is None:
            if options is None:
                raise ProviderConfigurationError(
                    "SmtpProvider requires SmtpProviderOptions or an ISmtpClient."
                )
            client = AiosmtplibClient.create(options)

        # Explicit options win over the client's for sender resolution.
        super().__init__(options if options is not None else client.options, logger)
        self.client = client

    @classmethod
    def from_options(
        cls, options: SmtpProviderOptions, logger: logging.Logger | None = None
    ) -> SmtpProvider:
        """Create a provider that sends through an aiosmtplib client."""
        return cls(options=options, logger=logger)

    @classmethod
    def from_client(cls, client: ISmtpClient, logger: logging.Logger | None = None) -> SmtpProvider:
        """Create a provider around an existing mail client."""
        return cls(client=client, logger=logger)

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    async def send(self, parameters: Mapping[str, str]) -> NotificationResult:
        email_message = EmailMessage.from_parameters(parameters)

        from_address = email_message.from_address or self.options.default_from_address
        if not from_address:
            return NotificationResult.failure([FROM_ADDRESS_REQUIRED])

        message = self._build_message(email_message, from_address)

        self.logger.debug(
            f"Sending email '{email_message.subject}' to {email_message.to_addresses}"
        )

        await self.client.send_message(message)

        self.logger.debug(
            f"Email '{email_message.subject}' sent to {email_message.to_addresses}"
        )

        return NotificationResult.success()

    @staticmethod
    def _build_message(
        email_message: EmailMessage, from_address: str
    ) -> email.message.EmailMessage:
        message = email.message.EmailMessage(policy=email.policy.default)
        message["From"] = parse_address(from_address)

        if email_message.to_addresses:
            message["To"] = [parse_address(a) for a in email_message.to_addresses]
        if email_message.cc_addresses:
            message["Cc"] = [parse_address(a) for a in email_message.cc_addresses]
        if email_message.bcc_addresses:
            message["Bcc"] = [parse_address(a) for a in email_message.bcc_addresses]

        if email_message.subject:
            message["Subject"] = email_message.subject

        message.set_content(
            email_message.body,
            subtype="html" if email_message.is_html else "plain",
            charset="utf-8",
        )
        return message
