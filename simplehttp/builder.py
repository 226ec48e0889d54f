"""Fluent builder for httpx requests."""

import re
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
import structlog

from .config import DEFAULT_BEARER_PREFIX, JSON_CONTENT_TYPE, JsonOptions
from .exceptions import InvalidHeaderError, InvalidUriError
from .models import HttpMethod
from .serialization import dumps

logger = structlog.get_logger(__name__)

# RFC 9110 field-name token
_HEADER_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\x00")

HeaderValues = str | Iterable[str]


def parse_uri(uri: httpx.URL | str) -> httpx.URL:
    """
    Parse a request URI.

    Args:
        uri: Pre-parsed URL or a string to parse

    Returns:
        Parsed URL

    Raises:
        InvalidUriError: If the string is not a valid absolute or relative URL
    """
    if isinstance(uri, httpx.URL):
        return uri
    if not isinstance(uri, str):
        raise InvalidUriError(repr(uri), f"URI must be a string or httpx.URL, got {type(uri).__name__}")
    try:
        return httpx.URL(uri)
    except httpx.InvalidURL as e:
        raise InvalidUriError(uri, f"Invalid URI {uri!r}: {e}") from e


def _check_value(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidHeaderError(name, f"Header {name!r} value must be a string, got {type(value).__name__}")
    if not value.isascii() or any(char in value for char in _FORBIDDEN_VALUE_CHARS):
        raise InvalidHeaderError(name, f"Invalid value for header {name!r}: {value!r}")
    return value


def _normalize_values(name: str, values: HeaderValues) -> list[str]:
    if not isinstance(name, str) or not _HEADER_NAME_RE.fullmatch(name):
        raise InvalidHeaderError(str(name), f"Invalid header name: {name!r}")

    if isinstance(values, str):
        return [_check_value(name, values)]
    if not isinstance(values, Iterable):
        raise InvalidHeaderError(
            name, f"Header {name!r} value must be a string or iterable of strings, got {type(values).__name__}"
        )
    return [_check_value(name, value) for value in values]


class SimpleHttpRequestBuilder:
    """
    Fluent builder for ``httpx.Request`` instances.

    The builder owns its state. Every ``with_*`` call returns the builder, and
    each ``build()`` returns a fresh request snapshot, so calls made after
    ``build()`` never change a request that was already handed out.

    Example:
        ```python
        from simplehttp import HttpMethod, SimpleHttpRequestBuilder

        request = (
            SimpleHttpRequestBuilder(HttpMethod.POST, "https://api.example.com/users")
            .with_bearer_token("access-token")
            .with_header("X-Request-Id", "abc-123")
            .with_json_body({"name": "John"})
            .build()
        )
        ```
    """

    def __init__(
        self,
        method: HttpMethod | str = HttpMethod.GET,
        uri: httpx.URL | str | None = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            method: HTTP method (default: GET)
            uri: Request URI, parsed eagerly when given as a string

        Raises:
            InvalidUriError: If the URI string is malformed
        """
        self._method: str = str(method)
        self._url: httpx.URL = parse_uri(uri) if uri is not None else httpx.URL()
        self._headers: list[tuple[str, str]] = []
        self._content: bytes | None = None
        self._content_type: str | None = None

    def with_method(self, method: HttpMethod | str) -> "SimpleHttpRequestBuilder":
        """Set the HTTP method. Non-standard verbs are accepted."""
        self._method = str(method)
        return self

    def with_uri(self, uri: httpx.URL | str) -> "SimpleHttpRequestBuilder":
        """
        Set the request URI.

        Raises:
            InvalidUriError: If the URI string is malformed
        """
        self._url = parse_uri(uri)
        return self

    def with_bearer_token(
        self, token: str, prefix: str = DEFAULT_BEARER_PREFIX
    ) -> "SimpleHttpRequestBuilder":
        """
        Set the Authorization header to ``"{prefix} {token}"``.

        Any previous Authorization value is replaced. The token format is not
        checked, but the composed value must be sendable as a header.

        Raises:
            InvalidHeaderError: If the composed value is not allowed on the wire
        """
        authorization = _check_value("Authorization", f"{prefix} {token}")
        self._headers = [
            (name, value) for name, value in self._headers if name.lower() != "authorization"
        ]
        self._headers.append(("Authorization", authorization))
        return self

    def with_header(self, name: str, value: HeaderValues) -> "SimpleHttpRequestBuilder":
        """
        Add one or more values for a header.

        Values accumulate: earlier values for the same name are kept.

        Args:
            name: Header name
            value: A single value or an iterable of values

        Raises:
            InvalidHeaderError: If the name or any value is not allowed on the wire
        """
        values = _normalize_values(name, value)
        self._headers.extend((name, v) for v in values)
        return self

    def with_headers(self, headers: Mapping[str, HeaderValues]) -> "SimpleHttpRequestBuilder":
        """
        Add several headers in the mapping's iteration order.

        Nothing is added when any entry is invalid.

        Raises:
            InvalidHeaderError: If any name or value is not allowed on the wire
        """
        pending = [(name, _normalize_values(name, values)) for name, values in headers.items()]
        for name, values in pending:
            self._headers.extend((name, v) for v in values)
        return self

    def with_json_body(
        self, value: Any, options: JsonOptions | None = None
    ) -> "SimpleHttpRequestBuilder":
        """
        Serialize a value as the UTF-8 JSON request body.

        Args:
            value: Value to serialize
            options: JSON options, defaults to compact output

        Raises:
            SerializationError: If the value cannot be serialized; the previous body is kept
        """
        payload = dumps(value, options)
        self._content = payload.encode("utf-8")
        self._content_type = JSON_CONTENT_TYPE
        return self

    def build(self) -> httpx.Request:
        """Return a new ``httpx.Request`` reflecting the current builder state."""
        headers = self._headers
        if self._content is not None:
            headers = [(name, value) for name, value in headers if name.lower() != "content-type"]
            headers.append(("Content-Type", self._content_type))

        request = httpx.Request(self._method, self._url, headers=headers, content=self._content)
        logger.debug(
            "Request built",
            method=request.method,
            url=str(request.url),
            header_count=len(headers),
            has_body=self._content is not None,
        )
        return request
