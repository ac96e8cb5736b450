"""Static package metadata and layered-configuration identifiers."""

from __future__ import annotations

name = "sgmail"
title = "Minimal client for the SendGrid v3 mail/send API"
version = "0.1.0"
author = "bitranox"

LAYEREDCONF_VENDOR = "bitranox"
LAYEREDCONF_APP = "sgmail"
LAYEREDCONF_SLUG = "sgmail"

__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "title",
    "version",
]
