"""Logging adapter: lib_log_rich runtime bound to standard logging.

Contents:
    * :func:`.setup.init_logging` - one-time runtime start and std-logging bridge
    * :class:`.setup.LogRichSettings` - the ``[lib_log_rich]`` config section
"""

from __future__ import annotations

from .setup import LogRichSettings, build_runtime_config, init_logging

__all__ = ["LogRichSettings", "build_runtime_config", "init_logging"]
