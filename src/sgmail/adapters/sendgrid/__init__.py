"""SendGrid adapter - HTTP delivery and client configuration.

Structure:
    * :mod:`.config` - SendGrid configuration model and loader
    * :mod:`.transport` - httpx-backed transports

Contents:
    * :class:`.config.SendGridConfig` - SendGrid configuration container
    * :func:`.config.load_sendgrid_config_from_dict` - Config dict loader
    * :func:`.transport.create_transport` - Transient or persistent transport factory
"""

from __future__ import annotations

from .config import SendGridConfig, load_sendgrid_config_from_dict
from .transport import PersistentTransport, TransientTransport, create_transport

__all__ = [
    "PersistentTransport",
    "SendGridConfig",
    "TransientTransport",
    "create_transport",
    "load_sendgrid_config_from_dict",
]
