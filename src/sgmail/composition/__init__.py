"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..adapters.sendgrid.config import load_sendgrid_config_from_dict
from ..adapters.sendgrid.transport import create_transport
from ..application.client import DEFAULT_ENDPOINT, MailClient
from ..domain.address import Address
from ..domain.enums import TransportMode
from ..domain.errors import ConfigurationError

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.transport import TransportSpy
    from ..application.ports import (
        CreateTransport,
        GetConfig,
        InitLogging,
        LoadSendGridConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_load_sendgrid_config_from_dict: LoadSendGridConfigFromDict = load_sendgrid_config_from_dict
    _assert_init_logging: InitLogging = init_logging
    _assert_create_transport: CreateTransport = create_transport


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    load_sendgrid_config_from_dict: LoadSendGridConfigFromDict
    init_logging: InitLogging
    create_transport: CreateTransport


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        load_sendgrid_config_from_dict=load_sendgrid_config_from_dict,
        init_logging=init_logging,
        create_transport=create_transport,
    )


def build_testing(*, spy: TransportSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional TransportSpy for capturing POSTs. When None, a fresh
            TransportSpy is created. Pass your own spy to assert on captured
            requests in tests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        TransportSpy,
        get_config_in_memory,
        init_logging_in_memory,
        load_sendgrid_config_from_dict_in_memory,
    )

    transport_spy = spy if spy is not None else TransportSpy()

    return AppServices(
        get_config=get_config_in_memory,
        load_sendgrid_config_from_dict=load_sendgrid_config_from_dict_in_memory,
        init_logging=init_logging_in_memory,
        create_transport=transport_spy.create_transport,
    )


def create_mail_client(
    api_key: str,
    default_from: Address | None = None,
    transport_mode: TransportMode | str = TransportMode.TRANSIENT,
    *,
    timeout: float = 30.0,
    verify_ssl: bool = True,
    endpoint: str = DEFAULT_ENDPOINT,
    async_workers: int = 4,
) -> MailClient:
    """Build a MailClient backed by an httpx transport.

    Args:
        api_key: SendGrid API key used as bearer token.
        default_from: Sender used when a send call gives none.
        transport_mode: ``"transient"`` (connection per send) or
            ``"persistent"`` (one pooled connection until ``close``).
        timeout: Seconds allowed per HTTP request.
        verify_ssl: Verify the server TLS certificate.
        endpoint: mail/send URL.
        async_workers: Threads available for deferred sends.

    Returns:
        A ready MailClient. Close it (or use it as a context manager) to
        release the persistent connection.

    Raises:
        ConfigurationError: When ``transport_mode`` is unknown.

    Example:
        >>> from sgmail.domain.address import address
        >>> with create_mail_client("SG.key", address("noreply@example.com")) as client:
        ...     client.endpoint
        'https://sendgrid.com/v3/mail/send'
    """
    transport = create_transport(transport_mode, timeout=timeout, verify_ssl=verify_ssl)
    return MailClient(
        api_key,
        default_from,
        transport=transport,
        endpoint=endpoint,
        async_workers=async_workers,
    )


def mail_client_from_config(
    services: AppServices | None = None,
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> MailClient:
    """Build a MailClient from layered configuration.

    Loads configuration, initialises logging, parses the [sendgrid] section,
    and wires the configured transport.

    Args:
        services: Port implementations; production wiring when None.
        profile: Optional configuration profile, e.g. ``"staging"``.
        start_dir: Optional directory that seeds .env discovery.

    Returns:
        A ready MailClient.

    Raises:
        ConfigurationError: When no API key is configured.
        pydantic.ValidationError: When the [sendgrid] section is invalid.
    """
    resolved = services if services is not None else build_production()
    config = resolved.get_config(profile=profile, start_dir=start_dir)
    resolved.init_logging(config)
    sendgrid_config = resolved.load_sendgrid_config_from_dict(config.as_dict())

    if sendgrid_config.api_key is None:
        raise ConfigurationError("No SendGrid API key configured (sendgrid.api_key is empty)")

    transport = resolved.create_transport(
        sendgrid_config.transport_mode,
        timeout=sendgrid_config.timeout,
        verify_ssl=sendgrid_config.verify_ssl,
    )
    return MailClient(
        sendgrid_config.api_key,
        sendgrid_config.default_from(),
        transport=transport,
        endpoint=sendgrid_config.endpoint,
        async_workers=sendgrid_config.async_workers,
    )


__all__ = [
    # Configuration
    "get_config",
    "load_sendgrid_config_from_dict",
    # Logging
    "init_logging",
    # Transport
    "create_transport",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
    "create_mail_client",
    "mail_client_from_config",
]
