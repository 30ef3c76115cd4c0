"""SMTP provider configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import parameter_key

PARAMETER_SERVER = parameter_key("Server")
PARAMETER_PORT = parameter_key("Port")
PARAMETER_USERNAME = parameter_key("Username")
PARAMETER_PASSWORD = parameter_key("Password")
PARAMETER_USE_SSL = parameter_key("UseSSL")
PARAMETER_DEFAULT_FROM_ADDRESS = parameter_key("DefaultFromAddress")
PARAMETER_TIMEOUT = parameter_key("Timeout")

_PARAMETER_FIELDS: dict[str, str] = {
    PARAMETER_SERVER: "server",
    PARAMETER_PORT: "port",
    PARAMETER_USERNAME: "username",
    PARAMETER_PASSWORD: "password",
    PARAMETER_USE_SSL: "use_ssl",
    PARAMETER_DEFAULT_FROM_ADDRESS: "default_from_address",
    PARAMETER_TIMEOUT: "timeout",
}


class SmtpProviderOptions(BaseModel):
    """Validated, immutable SMTP provider options.

    Attributes:
        server: SMTP host name.
        port: SMTP port.
        username: Login user; no login is attempted when unset.
        password: Login password, never included in ``repr()``.
        use_ssl: Upgrade the connection with STARTTLS.
        default_from_address: Sender used when a message carries none.
        timeout: Connection and command timeout in seconds.

    Example:
        ```python
        options = SmtpProviderOptions(
            server="smtp.example.com",
            port=587,
            username="mailer",
            password="secret",
            use_ssl=True,
            default_from_address="noreply@example.com",
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    server: str = ""
    port: int = Field(default=587, ge=0, le=65535)
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    use_ssl: bool = False
    default_from_address: str | None = None
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("username", "password", "default_from_address", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> SmtpProviderOptions:
        """Build options from ``smtp_``-prefixed parameters; unknown keys are ignored."""
        values = {
            field_name: parameters[key]
            for key, field_name in _PARAMETER_FIELDS.items()
            if key in parameters
        }
        return cls.model_validate(values)

    def to_parameters(self) -> dict[str, str]:
        """Serialize the configured options into ``smtp_``-prefixed parameters."""
        parameters: dict[str, str] = {}
        for key, field_name in _PARAMETER_FIELDS.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if isinstance(value, bool):
                parameters[key] = "true" if value else "false"
            else:
                parameters[key] = str(value)
        return parameters
