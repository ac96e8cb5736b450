"""SendGridConfig model: defaults, validators, repr redaction, dict loading."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from sgmail.adapters.sendgrid.config import SendGridConfig, load_sendgrid_config_from_dict
from sgmail.domain.address import address
from sgmail.domain.enums import TransportMode

# ======================== Defaults ========================


@pytest.mark.os_agnostic
def test_defaults() -> None:
    """An empty config uses transient transport against the public API."""
    config = SendGridConfig()

    assert config.api_key is None
    assert config.from_address is None
    assert config.transport_mode is TransportMode.TRANSIENT
    assert config.endpoint == "https://sendgrid.com/v3/mail/send"
    assert config.timeout == 30.0
    assert config.verify_ssl is True
    assert config.async_workers == 4


@pytest.mark.os_agnostic
def test_config_is_immutable() -> None:
    """Once created, SendGridConfig cannot be modified."""
    config = SendGridConfig()

    with pytest.raises(ValidationError):
        config.api_key = "SG.other"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_endpoint_tolerates_trailing_slash() -> None:
    """A trailing slash on base_url does not double up."""
    assert SendGridConfig(base_url="https://api.sendgrid.com/v3/").endpoint == "https://api.sendgrid.com/v3/mail/send"


# ======================== Validators ========================


@pytest.mark.os_agnostic
@given(whitespace=st.from_regex(r"\s*", fullmatch=True))
@settings(max_examples=50)
def test_blank_strings_coerce_to_none(whitespace: str) -> None:
    """Blank api_key/from_address/from_name mean 'not configured'."""
    config = SendGridConfig(api_key=whitespace, from_address=whitespace, from_name=whitespace)

    assert config.api_key is None
    assert config.from_address is None
    assert config.from_name is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["persistent", "PERSISTENT", " Persistent "])
def test_transport_mode_is_case_insensitive(raw: str) -> None:
    """Mode names from files or env vars are normalized."""
    assert SendGridConfig(transport_mode=raw).transport_mode is TransportMode.PERSISTENT  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_unknown_transport_mode_is_rejected() -> None:
    """Only transient and persistent are accepted."""
    with pytest.raises(ValidationError):
        SendGridConfig(transport_mode="pooled")  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@given(timeout=st.floats(max_value=0.0, allow_nan=False, allow_infinity=False))
@settings(max_examples=50)
def test_non_positive_timeouts_are_rejected(timeout: float) -> None:
    """Timeouts that are zero or negative are rejected by the model validator."""
    with pytest.raises(ValidationError, match="timeout must be positive"):
        SendGridConfig(timeout=timeout)


@pytest.mark.os_agnostic
def test_zero_async_workers_is_rejected() -> None:
    """Deferred sends need at least one worker."""
    with pytest.raises(ValidationError, match="async_workers must be at least 1"):
        SendGridConfig(async_workers=0)


@pytest.mark.os_agnostic
def test_from_address_without_marker_is_rejected() -> None:
    """The default sender obeys the same address rule as call arguments."""
    with pytest.raises(ValidationError, match="Invalid email address"):
        SendGridConfig(from_address="not-an-email")


@pytest.mark.os_agnostic
def test_default_from_combines_address_and_name() -> None:
    """from_address and from_name form the default sender."""
    config = SendGridConfig(from_address="noreply@example.com", from_name="Example")

    assert config.default_from() == address("noreply@example.com", "Example")


@pytest.mark.os_agnostic
def test_default_from_is_none_without_address() -> None:
    """No configured address means no default sender."""
    assert SendGridConfig().default_from() is None


@pytest.mark.os_agnostic
def test_name_without_address_is_rejected() -> None:
    """A display name cannot stand in for a missing sender address."""
    with pytest.raises(ValidationError, match="from_name is set but from_address is empty"):
        SendGridConfig(from_name="Example")


# ======================== repr ========================


@pytest.mark.os_agnostic
def test_repr_redacts_api_key() -> None:
    """The API key is shown as [REDACTED] in repr."""
    text = repr(SendGridConfig(api_key="SG.secret123", from_address="a@x.com"))

    assert "SG.secret123" not in text
    assert "api_key='[REDACTED]'" in text
    assert "from_address='a@x.com'" in text


@pytest.mark.os_agnostic
def test_repr_shows_none_api_key() -> None:
    """An unset key is displayed as None, not as redacted."""
    assert "api_key=None" in repr(SendGridConfig())


# ======================== Dict loading ========================


@pytest.mark.os_agnostic
def test_load_reads_sendgrid_section() -> None:
    """Values come from the [sendgrid] section."""
    config = load_sendgrid_config_from_dict(
        {
            "sendgrid": {
                "api_key": "SG.key",
                "from_address": "noreply@example.com",
                "transport_mode": "persistent",
                "timeout": 5,
            },
            "other": {"ignored": True},
        }
    )

    assert config.api_key == "SG.key"
    assert config.transport_mode is TransportMode.PERSISTENT
    assert config.timeout == 5.0


@pytest.mark.os_agnostic
def test_load_without_section_uses_defaults() -> None:
    """A missing section yields the defaults."""
    assert load_sendgrid_config_from_dict({}) == SendGridConfig()


@pytest.mark.os_agnostic
def test_load_rejects_non_mapping_section() -> None:
    """A scalar section is reported by Pydantic."""
    with pytest.raises(ValidationError):
        load_sendgrid_config_from_dict({"sendgrid": "invalid"})
