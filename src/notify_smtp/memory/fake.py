"""In-memory mail client for test assertions."""

from __future__ import annotations

import email.message
import logging

from notify_smtp.addresses import message_recipients
from notify_smtp.options import SmtpProviderOptions
from notify_smtp.ports.client import ISmtpClient

logger = logging.getLogger(__name__)


class InMemorySmtpClient(ISmtpClient):
    """
    Test double (Fake) that stores messages in a list for assertions.

    Set ``raise_exception`` to make the next sends fail like a transport error.
    """

    def __init__(
        self,
        options: SmtpProviderOptions | None = None,
        raise_exception: Exception | None = None,
    ) -> None:
        self._options = options or SmtpProviderOptions(server="localhost")
        self.raise_exception = raise_exception
        self.sent_messages: list[email.message.EmailMessage] = []

    @property
    def options(self) -> SmtpProviderOptions:
        return self._options

    async def send_message(self, message: email.message.EmailMessage) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.sent_messages.append(message)
        logger.debug(f"Captured email to {message_recipients(message)}")

    def assert_sent(self, recipient: str, count: int = 1) -> None:
        """Helper for test assertions; matches To, Cc and Bcc."""
        matches = [m for m in self.sent_messages if recipient in message_recipients(m)]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} messages to {recipient}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all sent messages and any configured failure."""
        self.sent_messages.clear()
        self.raise_exception = None
