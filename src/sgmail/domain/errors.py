"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent, e.g. no API key in the ``[sendgrid]`` section.

    Example:
        >>> from sgmail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No SendGrid API key configured")
        >>> str(err)
        'No SendGrid API key configured'
    """


class InvalidAddress(ValueError):
    """Email address validation failure.

    Only the presence of ``@`` is checked. Inherits from ValueError so
    generic ``except ValueError`` handlers catch it.

    Example:
        >>> from sgmail.domain.errors import InvalidAddress
        >>> err = InvalidAddress("Invalid email address: not-an-email")
        >>> isinstance(err, ValueError)
        True
    """


class RecipientListOutOfBounds(ValueError):
    """Recipient count outside the accepted 1..1000 range.

    Attributes:
        count: Number of recipients that was supplied.

    Example:
        >>> err = RecipientListOutOfBounds(0)
        >>> err.count
        0
        >>> str(err)
        'Recipient list must contain between 1 and 1000 addresses, got 0'
    """

    def __init__(self, count: int, minimum: int = 1, maximum: int = 1000) -> None:
        super().__init__(f"Recipient list must contain between {minimum} and {maximum} addresses, got {count}")
        self.count = count


class MissingFromAddress(ValueError):
    """No sender given on the call and no default sender configured."""


class EmptyContent(ValueError):
    """The content mapping holds no MIME parts."""


class TransportError(Exception):
    """Delivery failed inside the HTTP transport.

    Covers connection and TLS failures, timeouts, and non-success HTTP
    status codes. The client surfaces it unchanged; it is never retried.

    Attributes:
        status_code: HTTP status returned by the API, or None when no
            response was received.
        body: Response body text when available.

    Example:
        >>> err = TransportError("HTTP 401 from mail/send", status_code=401)
        >>> err.status_code
        401
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "ConfigurationError",
    "EmptyContent",
    "InvalidAddress",
    "MissingFromAddress",
    "RecipientListOutOfBounds",
    "TransportError",
]
