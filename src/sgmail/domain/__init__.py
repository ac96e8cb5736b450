"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects and pure functions that validate and compose a
mail/send request.

Contents:
    * :mod:`.address` - Address and RecipientList value objects
    * :mod:`.content` - MIME part ordering
    * :mod:`.payload` - MailRequest composition
    * :mod:`.enums` - Domain enumerations (TransportMode)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .address import (
    MAX_RECIPIENTS,
    MIN_RECIPIENTS,
    Address,
    RecipientList,
    address,
    parse_optional_recipients,
)
from .content import ContentPart, assemble_content
from .enums import TransportMode
from .errors import (
    ConfigurationError,
    EmptyContent,
    InvalidAddress,
    MissingFromAddress,
    RecipientListOutOfBounds,
    TransportError,
)
from .payload import MailRequest, Personalization, build_mail_request, resolve_sender

__all__ = [
    # Value objects
    "MAX_RECIPIENTS",
    "MIN_RECIPIENTS",
    "Address",
    "ContentPart",
    "MailRequest",
    "Personalization",
    "RecipientList",
    # Behaviors
    "address",
    "assemble_content",
    "build_mail_request",
    "parse_optional_recipients",
    "resolve_sender",
    # Enums
    "TransportMode",
    # Errors
    "ConfigurationError",
    "EmptyContent",
    "InvalidAddress",
    "MissingFromAddress",
    "RecipientListOutOfBounds",
    "TransportError",
]
