"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (HTTP, configuration, logging).

Contents:
    * :mod:`.config` - Layered configuration loading
    * :mod:`.sendgrid` - SendGrid configuration model and httpx transports
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory stand-ins for tests
"""

from __future__ import annotations

__all__: list[str] = []
