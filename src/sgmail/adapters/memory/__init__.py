"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.transport` - In-memory transport (TransportSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    get_config_in_memory,
    load_sendgrid_config_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .transport import TransportSpy

# Static conformance assertions
if TYPE_CHECKING:
    from sgmail.application.ports import (
        CreateTransport,
        GetConfig,
        InitLogging,
        LoadSendGridConfigFromDict,
        Transport,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_load_sendgrid_config: LoadSendGridConfigFromDict = load_sendgrid_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_transport: Transport = TransportSpy()
    _assert_create_transport: CreateTransport = TransportSpy().create_transport

__all__ = [
    "TransportSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_sendgrid_config_from_dict_in_memory",
]
