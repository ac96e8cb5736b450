"""Shared pytest fixtures for client, adapter, and composition tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from lib_layered_config import Config

from sgmail.adapters.memory import TransportSpy
from sgmail.application.client import MailClient
from sgmail.composition import AppServices, build_testing
from sgmail.domain.address import Address, address

_COVERAGE_BASENAME = ".coverage.sgmail"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    coverage.py stores trace data in SQLite, which needs POSIX file locking
    that network mounts do not reliably provide. Runs before pytest-cov
    creates its ``Coverage()`` object.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()


@pytest.fixture
def transport_spy() -> TransportSpy:
    """Provide a fresh TransportSpy per test.

    Example:
        def test_send(transport_spy: TransportSpy) -> None:
            client = MailClient("SG.key", transport=transport_spy)
            ...
            assert len(transport_spy.sent) == 1
    """
    return TransportSpy()


@pytest.fixture
def default_sender() -> Address:
    """Sender configured on clients that need a default from address."""
    return address("noreply@example.com", "Example")


@pytest.fixture
def mail_client(transport_spy: TransportSpy, default_sender: Address) -> Iterator[MailClient]:
    """Provide a MailClient with a default sender wired to ``transport_spy``.

    Yields:
        MailClient: Closed automatically after the test.
    """
    client = MailClient("SG.test-key", default_sender, transport=transport_spy)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Note: Only clears before, not after, to avoid errors when the function
    has been monkeypatched during the test (losing cache_clear method).
    """
    from sgmail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"sendgrid": {"api_key": "SG.key"}})
            assert config.get("sendgrid.api_key") == "SG.key"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    transport_spy: TransportSpy,
) -> Callable[[Config], AppServices]:
    """Return a factory producing test services that serve the given Config.

    Only the I/O boundaries (``get_config`` and the transport) are replaced;
    the real SendGridConfig parsing runs.

    Example:
        def test_build(inject_config, config_factory) -> None:
            services = inject_config(config_factory({"sendgrid": {"api_key": "SG.key"}}))
            client = mail_client_from_config(services)
    """

    def _inject(config: Config) -> AppServices:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        testing = build_testing(spy=transport_spy)
        return AppServices(
            get_config=_fake_get_config,
            load_sendgrid_config_from_dict=testing.load_sendgrid_config_from_dict,
            init_logging=testing.init_logging,
            create_transport=testing.create_transport,
        )

    return _inject
