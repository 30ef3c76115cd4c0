"""Console mail client for development debugging."""

from __future__ import annotations

import email.message
import logging

from notify_smtp.options import SmtpProviderOptions
from notify_smtp.ports.client import ISmtpClient

logger = logging.getLogger(__name__)


class ConsoleSmtpClient(ISmtpClient):
    """
    Development client that prints messages instead of sending them.
    """

    def __init__(
        self,
        options: SmtpProviderOptions | None = None,
        output_to_stdout: bool = True,
    ):
        self._options = options or SmtpProviderOptions(server="localhost")
        self.output_to_stdout = output_to_stdout

    @property
    def options(self) -> SmtpProviderOptions:
        return self._options

    async def send_message(self, message: email.message.EmailMessage) -> None:
        body = message.get_body(preferencelist=("html", "plain"))
        content_type = body.get_content_type() if body is not None else "text/plain"

        output = [
            "═" * 50,
            "EMAIL SENT VIA SMTP (console)",
            f"From:    {message['From']}",
            f"To:      {message['To'] or ''}",
        ]
        if message["Cc"]:
            output.append(f"Cc:      {message['Cc']}")
        if message["Bcc"]:
            output.append(f"Bcc:     {message['Bcc']}")
        output.append(f"Subject: {message['Subject'] or '(No Subject)'}")
        output.append(f"Type:    {content_type}")
        output.append(f"Body:    {body.get_content().rstrip() if body is not None else ''}")
        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)
