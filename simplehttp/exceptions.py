"""Exceptions for SimpleHttp."""


class SimpleHttpError(Exception):
    """Base exception for all SimpleHttp errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize SimpleHttpError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidUriError(SimpleHttpError):
    """Raised when a request URI cannot be parsed."""

    def __init__(self, uri: str, message: str | None = None) -> None:
        """Initialize InvalidUriError."""
        self.uri = uri
        super().__init__(message or f"Invalid URI: {uri!r}")


class InvalidHeaderError(SimpleHttpError):
    """Raised when a header name or value is not allowed on the wire."""

    def __init__(self, name: str, message: str | None = None) -> None:
        """Initialize InvalidHeaderError."""
        self.name = name
        super().__init__(message or f"Invalid header: {name!r}")


class SerializationError(SimpleHttpError):
    """Raised when a value cannot be converted to or from JSON."""

    def __init__(self, message: str = "JSON serialization failed") -> None:
        """Initialize SerializationError."""
        super().__init__(message)


class UnsuccessfulResponseError(SimpleHttpError):
    """Raised when a response status code is outside the 2xx range."""

    def __init__(self, status_code: int, reason_phrase: str = "") -> None:
        """Initialize UnsuccessfulResponseError."""
        self.reason_phrase = reason_phrase
        message = f"Response status code does not indicate success: {status_code}"
        if reason_phrase:
            message = f"{message} ({reason_phrase})"
        super().__init__(message, status_code=status_code)


class HeaderNotFoundError(SimpleHttpError):
    """Raised when a required response header is absent."""

    def __init__(self, name: str) -> None:
        """Initialize HeaderNotFoundError."""
        self.name = name
        super().__init__(f"Header not found: {name!r}")


class ContentConsumedError(SimpleHttpError):
    """Raised when a response body is read a second time."""

    def __init__(self, message: str = "Response content has already been consumed") -> None:
        """Initialize ContentConsumedError."""
        super().__init__(message)


class TransportError(SimpleHttpError):
    """Raised when the underlying HTTP transport fails."""

    def __init__(self, message: str = "HTTP transport failed") -> None:
        """Initialize TransportError."""
        super().__init__(message)


class TransportReadError(TransportError):
    """Raised when reading the response body from the transport fails."""

    def __init__(self, message: str = "Failed to read response content") -> None:
        """Initialize TransportReadError."""
        super().__init__(message)
