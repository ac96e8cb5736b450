"""Layered configuration for sgmail.

Sources merge in precedence order defaults, app, host, user, dotenv, env, so
``sendgrid.api_key`` can come from a user config file, a ``.env`` file, or the
process environment without touching code.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from sgmail import __init__conf__

_DEFAULT_CONFIG = Path(__file__).parent / "defaultconfig.toml"


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject empty, overlong, or path-traversing profile names.

    Raises:
        ValueError: When lib_layered_config refuses the name.
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` holding the [sendgrid] defaults."""
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load and cache the layered configuration.

    Args:
        profile: Optional profile such as ``"staging"``; adds a
            ``profile/<name>/`` directory to every lookup path.
        start_dir: Directory that seeds .env discovery; the working
            directory when None.

    Raises:
        ValueError: When ``profile`` is not a valid profile name. Invalid
            names are never cached.

    Example:
        >>> get_config().get("sendgrid.transport_mode")
        'transient'
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG,
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
