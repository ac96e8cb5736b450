"""Application ports: Protocol definitions for adapter implementations.

Each Protocol describes the surface the application layer relies on.
Adapter classes and module-level functions satisfy them via structural
subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``SendGridConfig``, ``httpx.Response``) are imported under
    ``TYPE_CHECKING`` only so the application layer never imports adapters
    at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import TransportMode

if TYPE_CHECKING:
    import httpx
    from lib_layered_config import Config

    from ..adapters.sendgrid.config import SendGridConfig


class Transport(Protocol):
    """Authenticated HTTP POST collaborator.

    Implementations return the response on success and raise
    :class:`~sgmail.domain.errors.TransportError` on any failure.
    """

    def post(self, url: str, *, json: Mapping[str, Any], headers: Mapping[str, str]) -> httpx.Response: ...

    def close(self) -> None: ...


class CreateTransport(Protocol):
    """Build a transport for the requested connection lifetime."""

    def __call__(
        self,
        mode: TransportMode = ...,
        *,
        timeout: float = ...,
        verify_ssl: bool = ...,
    ) -> Transport: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadSendGridConfigFromDict(Protocol):
    """Load SendGridConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SendGridConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateTransport",
    "GetConfig",
    "InitLogging",
    "LoadSendGridConfigFromDict",
    "Transport",
]
