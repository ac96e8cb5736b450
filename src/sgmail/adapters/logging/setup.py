"""Route sgmail's standard-library log records through lib_log_rich.

The mail client and transports log with ``logging.getLogger(__name__)`` and
structured ``extra=`` fields. :func:`init_logging` starts the lib_log_rich
runtime from the ``[lib_log_rich]`` config section and attaches it to the
standard logging tree so those records are rendered and shipped.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from sgmail import __init__conf__


class LogRichSettings(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; any other key
    is forwarded to ``RuntimeConfig`` untouched.

    Example:
        >>> LogRichSettings.model_validate({"console_level": "DEBUG"}).runtime_kwargs()
        {'service': 'sgmail', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def runtime_kwargs(self) -> dict[str, Any]:
        passthrough = self.model_dump(exclude={"service", "environment"}, exclude_none=True)
        return {
            "service": self.service or __init__conf__.name,
            "environment": self.environment,
            **passthrough,
        }


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the loaded configuration into a lib_log_rich RuntimeConfig."""
    section: object = config.get("lib_log_rich", default={})
    settings = LogRichSettings.model_validate(cast("dict[str, Any]", section) if section else {})
    return lib_log_rich.runtime.RuntimeConfig(**settings.runtime_kwargs())


def init_logging(config: Config) -> None:
    """Start lib_log_rich once per process and bridge standard logging.

    LOG_* variables from a ``.env`` file are honoured. Calls after the
    runtime is up return immediately.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LogRichSettings",
    "build_runtime_config",
    "init_logging",
]
