"""Type-safe domain enums for transport selection."""

from __future__ import annotations

from enum import Enum


class TransportMode(str, Enum):
    """HTTP connection lifetime used by a mail client.

    Inherits from str so values read from configuration files compare
    directly against members.

    Attributes:
        TRANSIENT: Open a fresh connection for every send.
        PERSISTENT: Reuse one pooled connection across sends until closed.

    Example:
        >>> TransportMode.TRANSIENT.value
        'transient'
        >>> TransportMode.PERSISTENT == "persistent"
        True
    """

    TRANSIENT = "transient"
    PERSISTENT = "persistent"


__all__ = [
    "TransportMode",
]
