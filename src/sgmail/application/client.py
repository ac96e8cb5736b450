"""Mail client use case: validate, compose, and dispatch one email.

Contents:
    * :data:`DEFAULT_ENDPOINT` - SendGrid v3 mail/send URL.
    * :class:`ClientConfig` - read-only credentials and default sender.
    * :class:`MailClient` - blocking and deferred ``send``.

System Role:
    Application layer. Depends on the domain for validation and on the
    :class:`~sgmail.application.ports.Transport` port for I/O; concrete
    transports are wired in :mod:`sgmail.composition`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from types import TracebackType
from typing import TYPE_CHECKING, Any, Literal, overload

from ..domain.address import Address, AddressLike, RecipientsInput
from ..domain.payload import MailRequest, build_mail_request

if TYPE_CHECKING:
    import httpx

    from .ports import Transport

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://sendgrid.com/v3/mail/send"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Credentials and default sender shared by every send of one client."""

    api_key: str
    default_from: Address | None = None

    def __repr__(self) -> str:
        """Return representation with the API key redacted.

        Example:
            >>> "SG.secret" in repr(ClientConfig(api_key="SG.secret"))
            False
        """
        return f"ClientConfig(api_key='[REDACTED]', default_from={self.default_from!r})"


class MailClient:
    """Send transactional email through an injected transport.

    Every call is a single best-effort attempt: no retry, no backoff, no
    idempotency key. Validation always completes before the transport is
    touched.

    Example:
        >>> from sgmail.adapters.memory import TransportSpy
        >>> from sgmail.domain.address import address
        >>> spy = TransportSpy()
        >>> client = MailClient("SG.key", address("a@x.com"), transport=spy)
        >>> client.send(to="b@x.com", subject="Hi", content={"text/plain": "hello"}).status_code
        202
        >>> spy.sent[0]["json"]["from"]
        {'email': 'a@x.com'}
    """

    def __init__(
        self,
        api_key: str,
        default_from: Address | None = None,
        *,
        transport: Transport,
        endpoint: str = DEFAULT_ENDPOINT,
        async_workers: int = 4,
    ) -> None:
        self._config = ClientConfig(api_key=api_key, default_from=default_from)
        self._transport = transport
        self._endpoint = endpoint
        self._async_workers = async_workers
        self._executor: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._blocking_sends = 0
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @overload
    def send(
        self,
        *,
        to: RecipientsInput,
        subject: str,
        content: Mapping[str, str],
        cc: RecipientsInput | None = ...,
        bcc: RecipientsInput | None = ...,
        from_address: AddressLike | None = ...,
        reply_to: AddressLike | None = ...,
        sandbox: bool = ...,
        async_: Literal[False] = ...,
    ) -> httpx.Response: ...

    @overload
    def send(
        self,
        *,
        to: RecipientsInput,
        subject: str,
        content: Mapping[str, str],
        cc: RecipientsInput | None = ...,
        bcc: RecipientsInput | None = ...,
        from_address: AddressLike | None = ...,
        reply_to: AddressLike | None = ...,
        sandbox: bool = ...,
        async_: Literal[True],
    ) -> Future[httpx.Response]: ...

    def send(
        self,
        *,
        to: RecipientsInput,
        subject: str,
        content: Mapping[str, str],
        cc: RecipientsInput | None = None,
        bcc: RecipientsInput | None = None,
        from_address: AddressLike | None = None,
        reply_to: AddressLike | None = None,
        sandbox: bool = False,
        async_: bool = False,
    ) -> httpx.Response | Future[httpx.Response]:
        """Validate, compose, and POST one email.

        Args:
            to: Required recipients (single address or sequence, 1..1000).
            subject: Subject line.
            content: MIME type to body text; ``text/plain`` and ``text/html``
                are sent first.
            cc: Optional carbon-copy recipients; omitted when None.
            bcc: Optional blind-copy recipients; omitted when None.
            from_address: Sender override. Uses the client default when None.
            reply_to: Optional reply-to address.
            sandbox: Ask the API to validate without delivering.
            async_: Return a Future immediately instead of blocking.

        Returns:
            The transport response, or a Future resolving to it when
            ``async_`` is True.

        Raises:
            InvalidAddress: An address lacks ``@``.
            RecipientListOutOfBounds: A recipient field has 0 or >1000 entries.
            MissingFromAddress: No sender override and no client default.
            EmptyContent: ``content`` is empty.
            TransportError: Blocking send failed in the transport. Deferred
                sends raise it from ``Future.result()`` instead.
            RuntimeError: The client has been closed.
        """
        if self._closed:
            raise RuntimeError("MailClient is closed")

        request = build_mail_request(
            to=to,
            subject=subject,
            content=content,
            cc=cc,
            bcc=bcc,
            from_address=from_address,
            default_from=self._config.default_from,
            reply_to=reply_to,
            sandbox=sandbox,
        )
        body = request.to_dict()

        if async_:
            return self._submit(request, body)
        return self._dispatch_blocking(request, body)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def _dispatch(self, request: MailRequest, body: Mapping[str, Any]) -> httpx.Response:
        response = self._transport.post(self._endpoint, json=body, headers=self._headers())
        logger.info(
            "Email accepted",
            extra={
                "sender": request.sender.email,
                "status_code": response.status_code,
                "sandbox": request.sandbox,
            },
        )
        return response

    def _log_dispatch(self, request: MailRequest, *, deferred: bool) -> None:
        personalization = request.personalization
        logger.info(
            "Sending email",
            extra={
                "sender": request.sender.email,
                "to_count": len(personalization.to),
                "cc_count": len(personalization.cc) if personalization.cc is not None else 0,
                "bcc_count": len(personalization.bcc) if personalization.bcc is not None else 0,
                "subject": request.subject,
                "content_types": [part.type for part in request.content],
                "sandbox": request.sandbox,
                "deferred": deferred,
            },
        )

    def _ensure_open(self) -> None:
        # caller holds self._lock
        if self._closed:
            raise RuntimeError("MailClient is closed")

    def _dispatch_blocking(self, request: MailRequest, body: Mapping[str, Any]) -> httpx.Response:
        with self._lock:
            self._ensure_open()
            self._blocking_sends += 1
        try:
            self._log_dispatch(request, deferred=False)
            return self._dispatch(request, body)
        finally:
            with self._lock:
                self._blocking_sends -= 1
                self._idle.notify_all()

    def _submit(self, request: MailRequest, body: Mapping[str, Any]) -> Future[httpx.Response]:
        with self._lock:
            self._ensure_open()
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._async_workers,
                    thread_name_prefix="sgmail-send",
                )
            future = self._executor.submit(self._dispatch, request, body)
        self._log_dispatch(request, deferred=True)
        return future

    def close(self) -> None:
        """Wait for in-flight sends, then release the executor and transport.

        Sends that have not been accepted yet fail with ``RuntimeError``.
        Safe to call more than once.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor, self._executor = self._executor, None
            self._idle.wait_for(lambda: self._blocking_sends == 0)
        if executor is not None:
            executor.shutdown(wait=True)
        self._transport.close()

    def __enter__(self) -> MailClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "DEFAULT_ENDPOINT",
    "ClientConfig",
    "MailClient",
]
