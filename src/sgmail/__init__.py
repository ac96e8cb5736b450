"""Public package surface for composing and sending SendGrid email.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: address value objects, payload composition, errors
- Application exports: the MailClient use case
- Composition exports: wired client factories
"""

from __future__ import annotations

from .application.client import MailClient

# Composition exports (wired adapters)
from .composition import create_mail_client, mail_client_from_config

# Domain exports
from .domain.address import Address, RecipientList, address
from .domain.content import assemble_content
from .domain.enums import TransportMode
from .domain.errors import (
    ConfigurationError,
    EmptyContent,
    InvalidAddress,
    MissingFromAddress,
    RecipientListOutOfBounds,
    TransportError,
)
from .domain.payload import MailRequest, build_mail_request

__all__ = [
    "Address",
    "ConfigurationError",
    "EmptyContent",
    "InvalidAddress",
    "MailClient",
    "MailRequest",
    "MissingFromAddress",
    "RecipientList",
    "RecipientListOutOfBounds",
    "TransportError",
    "TransportMode",
    "address",
    "assemble_content",
    "build_mail_request",
    "create_mail_client",
    "mail_client_from_config",
]
