"""Port behavioral contract tests: verify in-memory adapter implementations.

Static type conformance is enforced by pyright through the assertions in
``sgmail.adapters.memory`` and ``sgmail.composition``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
from lib_layered_config import Config

from sgmail.adapters.memory import (
    TransportSpy,
    get_config_in_memory,
    init_logging_in_memory,
    load_sendgrid_config_from_dict_in_memory,
)
from sgmail.adapters.sendgrid.config import SendGridConfig
from sgmail.domain.enums import TransportMode

if TYPE_CHECKING:
    from sgmail.application.ports import (
        CreateTransport,
        GetConfig,
        InitLogging,
        LoadSendGridConfigFromDict,
        Transport,
    )


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def load_sendgrid_config_impl() -> LoadSendGridConfigFromDict:
    """Provide in-memory LoadSendGridConfigFromDict implementation."""
    return load_sendgrid_config_from_dict_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    """Provide in-memory InitLogging implementation."""
    return init_logging_in_memory


@pytest.fixture
def transport_impl() -> Transport:
    """Provide in-memory Transport implementation."""
    return TransportSpy()


@pytest.fixture
def create_transport_impl() -> CreateTransport:
    """Provide in-memory CreateTransport implementation."""
    return TransportSpy().create_transport


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    """GetConfig must return a Config whose as_dict() yields a dict."""
    config = get_config_impl()
    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_load_sendgrid_config_returns_model(load_sendgrid_config_impl: LoadSendGridConfigFromDict) -> None:
    """LoadSendGridConfigFromDict must return a SendGridConfig from a valid dict."""
    result = load_sendgrid_config_impl({"sendgrid": {"api_key": "SG.key", "from_address": "a@x.com"}})
    assert isinstance(result, SendGridConfig)
    assert result.api_key == "SG.key"


@pytest.mark.os_agnostic
def test_init_logging_accepts_config(init_logging_impl: InitLogging) -> None:
    """InitLogging must accept a Config without raising."""
    init_logging_impl(Config({}, {}))


@pytest.mark.os_agnostic
def test_transport_post_returns_response(transport_impl: Transport) -> None:
    """Transport.post must return an httpx.Response."""
    response = transport_impl.post("https://api.test/mail/send", json={"subject": "Hi"}, headers={})
    assert isinstance(response, httpx.Response)
    transport_impl.close()


@pytest.mark.os_agnostic
def test_create_transport_returns_transport(create_transport_impl: CreateTransport) -> None:
    """CreateTransport must hand out an object with post and close."""
    transport = create_transport_impl(TransportMode.PERSISTENT, timeout=5.0, verify_ssl=True)
    assert callable(transport.post)
    assert callable(transport.close)


@pytest.mark.os_agnostic
def test_transport_spy_raises_configured_exception() -> None:
    """A configured exception is raised after the call is recorded."""
    spy = TransportSpy(raise_exception=RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        spy.post("https://api.test/mail/send", json={}, headers={})

    assert len(spy.sent) == 1


@pytest.mark.os_agnostic
def test_transport_spy_clear_resets_state() -> None:
    """clear() empties captured calls and failure settings."""
    spy = TransportSpy(raise_exception=RuntimeError("boom"))
    spy.create_transport(TransportMode.TRANSIENT)
    spy.close()

    spy.clear()

    assert spy.sent == []
    assert spy.modes == []
    assert spy.raise_exception is None
    assert spy.closed is False
