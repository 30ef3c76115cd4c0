"""Mail client port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import email.message

    from ..options import SmtpProviderOptions


@runtime_checkable
class ISmtpClient(Protocol):
    """
    Overridable contract for the mail client the SMTP provider delegates to.

    Implementations: AiosmtplibClient, InMemorySmtpClient, ConsoleSmtpClient.
    """

    @property
    def options(self) -> SmtpProviderOptions:
        """Options the client was created with."""
        ...

    async def send_message(self, message: email.message.EmailMessage) -> None:
        """Deliver *message*; failures are raised, not returned."""
        ...
