"""Address parsing for outgoing messages."""

from __future__ import annotations

import email.errors
import email.message
import email.policy
from email.headerregistry import Address

from .exceptions import InvalidAddressError

_RECIPIENT_HEADERS = ("To", "Cc", "Bcc")


def parse_address(value: str) -> Address:
    """
    Parse ``"user@example.com"`` or ``"Display Name <user@example.com>"``.

    The value must hold exactly one address that parses without defects;
    nothing is repaired or dropped.

    Raises:
        InvalidAddressError: When *value* is not a single well-formed address.
    """
    stripped = value.strip()
    try:
        header = email.policy.default.header_factory("To", stripped)
        addresses: tuple[Address, ...] = header.addresses
    except (ValueError, IndexError, email.errors.HeaderParseError) as e:
        raise InvalidAddressError(value, str(e)) from e

    if len(addresses) != 1:
        raise InvalidAddressError(value, f"expected one address, found {len(addresses)}")
    if header.defects:
        raise InvalidAddressError(value, str(header.defects[0]))

    address = addresses[0]
    if not address.username or not address.domain:
        raise InvalidAddressError(value, "missing local part or domain")
    if address.addr_spec not in stripped:
        raise InvalidAddressError(value, f"parsed as {address.addr_spec!r}")
    return address


def message_recipients(message: email.message.EmailMessage) -> list[str]:
    """Return the To, Cc and Bcc addr-specs of a built message."""
    recipients: list[str] = []
    for name in _RECIPIENT_HEADERS:
        header = message[name]
        if header is None:
            continue
        addresses: tuple[Address, ...] = header.addresses
        recipients.extend(a.addr_spec for a in addresses)
    return recipients
