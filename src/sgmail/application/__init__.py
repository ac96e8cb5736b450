"""Application layer - use cases and port definitions.

Contains the mail client use case and the port protocols that define the
interfaces for adapter implementations.

Contents:
    * :mod:`.client` - MailClient and ClientConfig
    * :mod:`.ports` - Protocol definitions for adapter implementations
"""

from __future__ import annotations

from .client import DEFAULT_ENDPOINT, ClientConfig, MailClient
from .ports import (
    CreateTransport,
    GetConfig,
    InitLogging,
    LoadSendGridConfigFromDict,
    Transport,
)

__all__ = [
    "DEFAULT_ENDPOINT",
    "ClientConfig",
    "CreateTransport",
    "GetConfig",
    "InitLogging",
    "LoadSendGridConfigFromDict",
    "MailClient",
    "Transport",
]
