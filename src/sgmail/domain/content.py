"""Canonical ordering of MIME body parts for the mail/send API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"


@dataclass(frozen=True, slots=True)
class ContentPart:
    """One MIME body part."""

    type: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "value": self.value}


def assemble_content(content: Mapping[str, str]) -> tuple[ContentPart, ...]:
    """Order body parts as the API requires.

    ``text/plain`` comes first and ``text/html`` second, each only when
    present. All other types follow in the mapping's iteration order.

    Args:
        content: MIME type to body text.

    Returns:
        Ordered content parts.

    Example:
        >>> parts = assemble_content({"text/html": "<p>hi</p>", "text/calendar": "X", "text/plain": "hi"})
        >>> [part.type for part in parts]
        ['text/plain', 'text/html', 'text/calendar']
        >>> [part.type for part in assemble_content({"text/x-amp": "a", "text/html": "h"})]
        ['text/html', 'text/x-amp']
    """
    ordered: list[ContentPart] = []
    for preferred in (TEXT_PLAIN, TEXT_HTML):
        if preferred in content:
            ordered.append(ContentPart(type=preferred, value=content[preferred]))
    ordered.extend(
        ContentPart(type=mime_type, value=value)
        for mime_type, value in content.items()
        if mime_type not in (TEXT_PLAIN, TEXT_HTML)
    )
    return tuple(ordered)


__all__ = [
    "TEXT_HTML",
    "TEXT_PLAIN",
    "ContentPart",
    "assemble_content",
]
