"""Composition of the mail/send request body.

Pure functions and frozen value objects only; nothing here performs I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .address import (
    Address,
    AddressLike,
    RecipientList,
    RecipientsInput,
    as_address,
    parse_optional_recipients,
)
from .content import ContentPart, assemble_content
from .errors import EmptyContent, MissingFromAddress


@dataclass(frozen=True, slots=True)
class Personalization:
    """Recipient grouping for one send. ``cc``/``bcc`` are None when absent."""

    to: RecipientList
    cc: RecipientList | None = None
    bcc: RecipientList | None = None

    def to_dict(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"to": self.to.to_list()}
        if self.cc is not None:
            rendered["cc"] = self.cc.to_list()
        if self.bcc is not None:
            rendered["bcc"] = self.bcc.to_list()
        return rendered


@dataclass(frozen=True, slots=True)
class MailRequest:
    """Fully validated mail/send request.

    Always carries exactly one personalization block.
    """

    sender: Address
    personalization: Personalization
    subject: str
    content: tuple[ContentPart, ...]
    reply_to: Address | None = None
    sandbox: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON body expected by ``POST /v3/mail/send``.

        ``reply_to`` and ``mail_settings`` appear only when set.
        """
        body: dict[str, Any] = {
            "from": self.sender.to_dict(),
            "personalizations": [self.personalization.to_dict()],
            "subject": self.subject,
            "content": [part.to_dict() for part in self.content],
        }
        if self.reply_to is not None:
            body["reply_to"] = self.reply_to.to_dict()
        if self.sandbox:
            body["mail_settings"] = {"sandbox_mode": {"enable": True}}
        return body


def resolve_sender(from_address: AddressLike | None, default_from: Address | None) -> Address:
    """Pick the per-call sender, else the client default.

    Args:
        from_address: Sender given on the call, or None.
        default_from: Sender configured on the client, or None.

    Returns:
        The resolved sender.

    Raises:
        MissingFromAddress: When neither is available.
        InvalidAddress: When the chosen sender lacks ``@``.
    """
    if from_address is not None:
        return as_address(from_address)
    if default_from is not None:
        return as_address(default_from)
    raise MissingFromAddress("No from address given and no default sender configured")


def build_mail_request(
    *,
    to: RecipientsInput,
    subject: str,
    content: Mapping[str, str],
    cc: RecipientsInput | None = None,
    bcc: RecipientsInput | None = None,
    from_address: AddressLike | None = None,
    default_from: Address | None = None,
    reply_to: AddressLike | None = None,
    sandbox: bool = False,
) -> MailRequest:
    """Validate every field and compose a :class:`MailRequest`.

    Args:
        to: Required recipients (single address or sequence).
        subject: Subject line.
        content: MIME type to body; must hold at least one entry.
        cc: Optional carbon-copy recipients; omitted when None.
        bcc: Optional blind-copy recipients; omitted when None.
        from_address: Per-call sender; overrides ``default_from``.
        default_from: Client-level sender used when ``from_address`` is None.
        reply_to: Optional reply-to address.
        sandbox: When True the API validates but does not deliver.

    Returns:
        The composed request.

    Raises:
        InvalidAddress: Any address lacks ``@``.
        RecipientListOutOfBounds: A recipient field has 0 or more than 1000 entries.
        MissingFromAddress: No sender could be resolved.
        EmptyContent: ``content`` is empty.

    Example:
        >>> from sgmail.domain.address import address
        >>> request = build_mail_request(
        ...     from_address=address("a@x.com", "A"),
        ...     to=address("b@x.com", "B"),
        ...     subject="Hi",
        ...     content={"text/plain": "hello"},
        ... )
        >>> request.to_dict()["personalizations"]
        [{'to': [{'email': 'b@x.com', 'name': 'B'}]}]
    """
    sender = resolve_sender(from_address, default_from)
    personalization = Personalization(
        to=RecipientList.of(to),
        cc=parse_optional_recipients(cc),
        bcc=parse_optional_recipients(bcc),
    )
    if not content:
        raise EmptyContent("Content must contain at least one MIME part")

    return MailRequest(
        sender=sender,
        personalization=personalization,
        subject=subject,
        content=assemble_content(content),
        reply_to=as_address(reply_to) if reply_to is not None else None,
        sandbox=bool(sandbox),
    )


__all__ = [
    "MailRequest",
    "Personalization",
    "build_mail_request",
    "resolve_sender",
]
