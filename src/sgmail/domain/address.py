"""Address and recipient-list value objects.

Validation runs once, at construction. Code holding an :class:`Address` or
:class:`RecipientList` can rely on it being valid.

Contents:
    * :class:`Address` - email plus optional display name.
    * :func:`address` - validating factory for :class:`Address`.
    * :class:`RecipientList` - 1..1000 addresses from one item or a sequence.
    * :func:`parse_optional_recipients` - ``None``-preserving variant for cc/bcc.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from .errors import InvalidAddress, RecipientListOutOfBounds

MIN_RECIPIENTS = 1
MAX_RECIPIENTS = 1000


@dataclass(frozen=True, slots=True)
class Address:
    """Validated email address with an optional display name.

    Instances are produced by :func:`address`; the constructor itself does
    not validate.
    """

    email: str
    name: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Render the wire form, omitting ``name`` when it is absent.

        Example:
            >>> address("a@x.com").to_dict()
            {'email': 'a@x.com'}
            >>> address("a@x.com", "A").to_dict()
            {'email': 'a@x.com', 'name': 'A'}
        """
        rendered = {"email": self.email}
        if self.name is not None:
            rendered["name"] = self.name
        return rendered


def address(email: str, name: str | None = None) -> Address:
    """Build an :class:`Address`, requiring ``@`` in the email.

    No other format check is performed; callers depend on the permissive
    rule, so it must stay this weak.

    Args:
        email: Email address string.
        name: Optional display name.

    Returns:
        The validated address.

    Raises:
        InvalidAddress: When ``email`` is not a string containing ``@``.

    Example:
        >>> address("b@x.com", "B")
        Address(email='b@x.com', name='B')
        >>> address("nobody")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidAddress: Invalid email address: 'nobody'
    """
    if not isinstance(email, str) or "@" not in email:
        raise InvalidAddress(f"Invalid email address: {email!r}")
    return Address(email=email, name=name)


AddressLike = Union[Address, str]
RecipientsInput = Union[AddressLike, Sequence[AddressLike]]


def as_address(item: Any) -> Address:
    """Accept an Address or an email string and return a validated Address."""
    if isinstance(item, Address):
        # Address() can be called directly, so re-check the marker here.
        return address(item.email, item.name)
    if isinstance(item, str):
        return address(item)
    raise InvalidAddress(f"Expected an Address or email string, got {type(item).__name__}")


@dataclass(frozen=True, slots=True)
class RecipientList:
    """Ordered, bounded collection of recipient addresses."""

    addresses: tuple[Address, ...]

    @classmethod
    def of(cls, recipients: RecipientsInput) -> RecipientList:
        """Normalize a single recipient or a sequence into a RecipientList.

        A bare string or :class:`Address` counts as one recipient.

        Args:
            recipients: One address (``Address`` or email string) or a
                sequence of them.

        Returns:
            Validated recipient list holding 1..1000 addresses.

        Raises:
            RecipientListOutOfBounds: When the count is 0 or above 1000.
            InvalidAddress: When any element is not a valid address.

        Example:
            >>> RecipientList.of("b@x.com").to_list()
            [{'email': 'b@x.com'}]
            >>> len(RecipientList.of(["a@x.com", address("b@x.com", "B")]))
            2
        """
        if isinstance(recipients, (Address, str)):
            items: list[Any] = [recipients]
        else:
            items = list(recipients)

        if not MIN_RECIPIENTS <= len(items) <= MAX_RECIPIENTS:
            raise RecipientListOutOfBounds(len(items), MIN_RECIPIENTS, MAX_RECIPIENTS)

        return cls(addresses=tuple(as_address(item) for item in items))

    def __len__(self) -> int:
        return len(self.addresses)

    def to_list(self) -> list[dict[str, str]]:
        """Render every address in its wire form, preserving order."""
        return [item.to_dict() for item in self.addresses]


def parse_optional_recipients(recipients: RecipientsInput | None) -> RecipientList | None:
    """Parse an optional recipient field; ``None`` stays absent.

    An empty sequence is not the same as ``None`` and fails the bounds check.

    Example:
        >>> parse_optional_recipients(None) is None
        True
    """
    if recipients is None:
        return None
    return RecipientList.of(recipients)


__all__ = [
    "MAX_RECIPIENTS",
    "MIN_RECIPIENTS",
    "Address",
    "AddressLike",
    "RecipientList",
    "RecipientsInput",
    "address",
    "as_address",
    "parse_optional_recipients",
]
