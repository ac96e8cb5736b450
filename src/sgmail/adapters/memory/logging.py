"""Logging stand-in for tests.

Records emitted by sgmail stay on the standard logging tree, where pytest's
``caplog`` can inspect them, because the lib_log_rich runtime is never started.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the config and leave the process logging setup untouched."""


__all__ = ["init_logging_in_memory"]
