"""HTTP transports for the SendGrid API built on httpx.

Provides the transient and persistent implementations of the
:class:`~sgmail.application.ports.Transport` port and the factory that
selects between them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from sgmail.domain.enums import TransportMode
from sgmail.domain.errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "bearer",
    }
)


def _sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Returns a generic message when the original exception text contains
    keywords suggesting sensitive data (API keys, tokens). The full
    exception is preserved in the chain for DEBUG-level logging.

    Args:
        exc: The exception to sanitize.

    Returns:
        Sanitized message safe for user display.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection refused"))
        'Connection refused'
        >>> _sanitize_exception_message(FakeExc("Bearer SG.abc rejected"))
        'Email delivery failed. Check SendGrid transport configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Email delivery failed. Check SendGrid transport configuration."
    return str(exc) or type(exc).__name__


def _post(client: httpx.Client, url: str, json: Mapping[str, Any], headers: Mapping[str, str]) -> httpx.Response:
    """POST once and translate every failure into TransportError.

    Raises:
        TransportError: Connection, TLS, or timeout failure, or any 4xx/5xx
            status. ``status_code`` and ``body`` are set when a response
            was received.
    """
    try:
        response = client.post(url, json=dict(json), headers=dict(headers))
    except httpx.HTTPError as exc:
        logger.debug("SendGrid request failed", exc_info=True)
        raise TransportError(_sanitize_exception_message(exc)) from exc

    if response.is_error:
        logger.debug(
            "SendGrid rejected request",
            extra={"status_code": response.status_code, "url": url},
        )
        raise TransportError(
            f"SendGrid returned HTTP {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )
    return response


class TransientTransport:
    """Open a new connection for every POST and close it afterwards.

    Args:
        timeout: Seconds allowed for connect, read, and write.
        verify_ssl: Verify the server TLS certificate.
        http_transport: Optional lower-level httpx transport, e.g.
            ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._http_transport = http_transport

    def post(self, url: str, *, json: Mapping[str, Any], headers: Mapping[str, str]) -> httpx.Response:
        with httpx.Client(
            timeout=self._timeout,
            verify=self._verify_ssl,
            transport=self._http_transport,
        ) as client:
            return _post(client, url, json, headers)

    def close(self) -> None:
        """Nothing to release; each POST owns its connection."""


class PersistentTransport:
    """Reuse one pooled httpx client for all POSTs until closed.

    ``httpx.Client`` is safe to share between the threads running deferred
    sends.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            verify=verify_ssl,
            transport=http_transport,
        )

    def post(self, url: str, *, json: Mapping[str, Any], headers: Mapping[str, str]) -> httpx.Response:
        if self._client.is_closed:
            raise TransportError("SendGrid transport is closed")
        return _post(self._client, url, json, headers)

    def close(self) -> None:
        self._client.close()


def create_transport(
    mode: TransportMode | str = TransportMode.TRANSIENT,
    *,
    timeout: float = 30.0,
    verify_ssl: bool = True,
    http_transport: httpx.BaseTransport | None = None,
) -> TransientTransport | PersistentTransport:
    """Build the transport for the requested connection lifetime.

    Args:
        mode: ``"transient"`` or ``"persistent"``.
        timeout: Seconds allowed per request.
        verify_ssl: Verify the server TLS certificate.
        http_transport: Optional lower-level httpx transport.

    Returns:
        A transport exposing ``post`` and ``close``.

    Raises:
        ConfigurationError: When ``mode`` is not a known transport mode.

    Example:
        >>> type(create_transport("transient")).__name__
        'TransientTransport'
    """
    try:
        resolved = TransportMode(mode)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown transport mode: {mode!r}") from exc

    if resolved is TransportMode.PERSISTENT:
        return PersistentTransport(timeout=timeout, verify_ssl=verify_ssl, http_transport=http_transport)
    return TransientTransport(timeout=timeout, verify_ssl=verify_ssl, http_transport=http_transport)


__all__ = [
    "PersistentTransport",
    "TransientTransport",
    "create_transport",
]
