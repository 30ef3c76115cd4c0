"""Constants shared by the SMTP provider."""

from __future__ import annotations

PROVIDER_NAME = "smtp"
"""Name the provider registers under in a notification dispatcher."""

FROM_ADDRESS_REQUIRED = "From Address should not be empty"


def parameter_key(name: str) -> str:
    """Return the provider-prefixed parameter key for *name*."""
    return f"{PROVIDER_NAME}_{name}"
