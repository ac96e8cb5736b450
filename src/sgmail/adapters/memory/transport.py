"""In-memory transport for testing.

Provides a transport that satisfies the same Protocol as the httpx
transports but performs no network I/O.

Contents:
    * :class:`TransportSpy` - Captures POSTs for test assertions.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from sgmail.domain.enums import TransportMode


def _empty_post_list() -> list[dict[str, Any]]:
    """Create an empty typed list for POST records."""
    return []


@dataclass
class TransportSpy:
    """Captures transport calls for test assertions.

    Each test should create its own TransportSpy to avoid cross-test
    pollution.

    Attributes:
        sent: Captured POSTs as ``{"url", "json", "headers"}`` dicts.
        status_code: Status of the canned response (SendGrid answers 202).
        raise_exception: When set, ``post`` records the call, then raises it.
        release: When set, ``post`` blocks until the event is set, letting
            tests observe an in-flight deferred send.
        posting: Set as soon as ``post`` is entered, before waiting on
            ``release``.
        closed: True once ``close`` has been called.
        modes: Transport modes requested through ``create_transport``.

    Example:
        >>> spy = TransportSpy()
        >>> spy.post("https://api.test/mail/send", json={"subject": "Hi"}, headers={}).status_code
        202
        >>> spy.sent[0]["json"]
        {'subject': 'Hi'}
    """

    sent: list[dict[str, Any]] = field(default_factory=_empty_post_list)
    status_code: int = 202
    raise_exception: Exception | None = None
    release: threading.Event | None = None
    posting: threading.Event = field(default_factory=threading.Event)
    closed: bool = False
    modes: list[TransportMode] = field(default_factory=list)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.modes.clear()
        self.raise_exception = None
        self.closed = False
        self.posting.clear()

    def post(self, url: str, *, json: Mapping[str, Any], headers: Mapping[str, str]) -> httpx.Response:
        """Record the call and return a canned response or raise.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.posting.set()
        if self.release is not None:
            self.release.wait()
        self.sent.append({"url": url, "json": dict(json), "headers": dict(headers)})
        if self.raise_exception is not None:
            raise self.raise_exception
        return httpx.Response(self.status_code, request=httpx.Request("POST", url))

    def close(self) -> None:
        self.closed = True

    def create_transport(
        self,
        mode: TransportMode = TransportMode.TRANSIENT,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> TransportSpy:
        """Satisfy the CreateTransport protocol by handing out this spy."""
        self.modes.append(TransportMode(mode))
        return self


__all__ = ["TransportSpy"]
