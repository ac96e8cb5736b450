"""Configuration adapter - layered configuration loading.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching and profiles
    * ``defaultconfig.toml`` - Bundled defaults for the [sendgrid] and
      [lib_log_rich] sections
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile

__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
