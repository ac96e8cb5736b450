"""SendGrid configuration model and loader.

Provides the SendGridConfig Pydantic model for validated, immutable client
settings and the loader function to create it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from sgmail.domain.address import Address, address
from sgmail.domain.enums import TransportMode

DEFAULT_BASE_URL = "https://sendgrid.com/v3"


class SendGridConfig(BaseModel):
    """Validated, immutable SendGrid client configuration.

    Example:
        >>> config = SendGridConfig(api_key="SG.key", from_address="noreply@example.com")
        >>> config.transport_mode
        <TransportMode.TRANSIENT: 'transient'>
        >>> config.endpoint
        'https://sendgrid.com/v3/mail/send'
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    from_address: str | None = None
    from_name: str | None = None
    transport_mode: TransportMode = TransportMode.TRANSIENT
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    verify_ssl: bool = True
    async_workers: int = 4

    @field_validator("api_key", "from_address", "from_name", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Coerce empty or whitespace-only strings to None.

        Treats empty strings from config files as "not configured" rather
        than explicit empty values, so a blank api_key never produces a
        request with an empty bearer token.
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("transport_mode", mode="before")
    @classmethod
    def _normalize_transport_mode(cls, v: Any) -> Any:
        """Accept mode names case-insensitively, as written in TOML or env."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> SendGridConfig:
        """Validate configuration values.

        Catch common configuration mistakes early with clear error messages
        rather than letting them surface on the first send.

        Raises:
            ValueError: When configuration values are invalid.

        Example:
            >>> SendGridConfig(timeout=-5.0)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.async_workers < 1:
            raise ValueError(f"async_workers must be at least 1, got {self.async_workers}")

        if self.from_address is not None:
            address(self.from_address)
        elif self.from_name is not None:
            raise ValueError("from_name is set but from_address is empty")

        return self

    @property
    def endpoint(self) -> str:
        """Full mail/send URL derived from ``base_url``."""
        return f"{self.base_url.rstrip('/')}/mail/send"

    def default_from(self) -> Address | None:
        """Return the configured default sender, or None when unset.

        Example:
            >>> SendGridConfig(from_address="a@x.com", from_name="A").default_from()
            Address(email='a@x.com', name='A')
            >>> SendGridConfig().default_from() is None
            True
        """
        if self.from_address is None:
            return None
        return address(self.from_address, self.from_name)

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Prevents accidental credential exposure in logs, error messages,
        and debugging output. The key is shown as '[REDACTED]' when set.

        Example:
            >>> config = SendGridConfig(api_key="SG.secret123")
            >>> "SG.secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key" and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"SendGridConfig({', '.join(fields)})"


def load_sendgrid_config_from_dict(config_dict: Mapping[str, Any]) -> SendGridConfig:
    """Load SendGridConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    SendGridConfig Pydantic model. Single-parse validation at the boundary
    with no intermediate conversions.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'sendgrid' section.

    Returns:
        Configured SendGrid settings with defaults for missing values.

    Example:
        >>> config = load_sendgrid_config_from_dict(
        ...     {"sendgrid": {"api_key": "SG.key", "transport_mode": "Persistent"}}
        ... )
        >>> config.transport_mode.value
        'persistent'
        >>> load_sendgrid_config_from_dict({}).api_key is None
        True
    """
    section: Any = config_dict.get("sendgrid", {})

    # Non-mapping section (e.g. "sendgrid": "invalid") goes to Pydantic for the error
    if not isinstance(section, Mapping):
        return SendGridConfig.model_validate(section)

    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    return SendGridConfig.model_validate(raw if raw else {})


__all__ = [
    "DEFAULT_BASE_URL",
    "SendGridConfig",
    "load_sendgrid_config_from_dict",
]
