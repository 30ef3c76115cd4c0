"""Email message DTO and its parameter-map encoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .constants import parameter_key

PARAMETER_TO_ADDRESSES = parameter_key("ToAddresses")
PARAMETER_CC_ADDRESSES = parameter_key("CCAddresses")
PARAMETER_BCC_ADDRESSES = parameter_key("BCCAddresses")
PARAMETER_FROM_ADDRESS = parameter_key("FromAddress")
PARAMETER_SUBJECT = parameter_key("Subject")
PARAMETER_BODY = parameter_key("Body")
PARAMETER_IS_HTML = parameter_key("IsHtml")

MessageParameters = dict[str, str]
"""Generic string-keyed parameter bag passed through a dispatcher."""

_ADDRESS_SEPARATOR = ","


def _split_addresses(value: str) -> list[str]:
    return value.split(_ADDRESS_SEPARATOR)


def _parse_bool(value: str, default: bool = False) -> bool:
    """Parse ``"true"``/``"false"`` case-insensitively, falling back to *default*."""
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return default


@dataclass
class EmailMessage:
    """
    The email message that will be sent through SMTP.

    Address lists are never ``None`` and text fields default to ``""``.
    When ``from_address`` is empty the provider falls back to
    ``SmtpProviderOptions.default_from_address``.
    Individual addresses must not contain commas: lists are comma-joined
    in the parameter map without escaping.
    """

    to_addresses: list[str] = field(default_factory=list)
    cc_addresses: list[str] = field(default_factory=list)
    bcc_addresses: list[str] = field(default_factory=list)
    from_address: str = ""
    subject: str = ""
    body: str = ""
    is_html: bool = False

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, str]) -> EmailMessage:
        """Build a message from a parameter map; missing keys keep their defaults."""
        message = cls()

        if PARAMETER_TO_ADDRESSES in parameters:
            message.to_addresses = _split_addresses(parameters[PARAMETER_TO_ADDRESSES])
        if PARAMETER_CC_ADDRESSES in parameters:
            message.cc_addresses = _split_addresses(parameters[PARAMETER_CC_ADDRESSES])
        if PARAMETER_BCC_ADDRESSES in parameters:
            message.bcc_addresses = _split_addresses(parameters[PARAMETER_BCC_ADDRESSES])

        if PARAMETER_FROM_ADDRESS in parameters:
            message.from_address = parameters[PARAMETER_FROM_ADDRESS]
        if PARAMETER_SUBJECT in parameters:
            message.subject = parameters[PARAMETER_SUBJECT]
        if PARAMETER_BODY in parameters:
            message.body = parameters[PARAMETER_BODY]

        if PARAMETER_IS_HTML in parameters:
            message.is_html = _parse_bool(parameters[PARAMETER_IS_HTML])

        return message

    def to_parameters(self) -> MessageParameters:
        """Convert the non-empty fields into message parameters."""
        parameters: MessageParameters = {}

        if self.to_addresses:
            parameters[PARAMETER_TO_ADDRESSES] = _ADDRESS_SEPARATOR.join(self.to_addresses)
        if self.cc_addresses:
            parameters[PARAMETER_CC_ADDRESSES] = _ADDRESS_SEPARATOR.join(self.cc_addresses)
        if self.bcc_addresses:
            parameters[PARAMETER_BCC_ADDRESSES] = _ADDRESS_SEPARATOR.join(self.bcc_addresses)

        if self.from_address:
            parameters[PARAMETER_FROM_ADDRESS] = self.from_address
        if self.subject:
            parameters[PARAMETER_SUBJECT] = self.subject
        if self.body:
            parameters[PARAMETER_BODY] = self.body

        parameters[PARAMETER_IS_HTML] = "true" if self.is_html else "false"

        return parameters
