"""Thin wrapper around httpx responses."""

from typing import Any

import httpx
import structlog

from .config import JsonOptions
from .exceptions import (
    ContentConsumedError,
    HeaderNotFoundError,
    SerializationError,
    TransportReadError,
    UnsuccessfulResponseError,
)
from .serialization import loads

logger = structlog.get_logger(__name__)


class SimpleHttpResponse:
    """
    Typed, read-only access to an ``httpx.Response``.

    The wrapper does not own the response and never closes it. Its body can be
    deserialized once; later calls raise ``ContentConsumedError``.

    Example:
        ```python
        response = SimpleHttpResponse(await client.send(request))
        user = await response.ensure_success_status_code().deserialize_json_content(User)
        request_id = response.get_header_value("X-Request-Id")
        ```
    """

    def __init__(self, response: httpx.Response) -> None:
        """
        Wrap a received response.

        Args:
            response: The httpx response to expose
        """
        self._response = response
        self._content_consumed = False

    @property
    def status_code(self) -> int:
        """Status code of the response."""
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        """Reason phrase sent by the server, or the standard phrase for the code."""
        return self._response.reason_phrase

    @property
    def is_success_status_code(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return self._response.is_success

    @property
    def is_content_consumed(self) -> bool:
        """Whether the body has already been taken through this wrapper."""
        return self._content_consumed

    def get_raw_response(self) -> httpx.Response:
        """Return the wrapped ``httpx.Response``."""
        return self._response

    def ensure_success_status_code(self) -> "SimpleHttpResponse":
        """
        Raise unless the status code indicates success.

        Returns:
            The wrapper itself, for chaining

        Raises:
            UnsuccessfulResponseError: If the status code is outside 200-299
        """
        if not self.is_success_status_code:
            logger.warning(
                "Unsuccessful response",
                status_code=self.status_code,
                reason_phrase=self.reason_phrase,
            )
            raise UnsuccessfulResponseError(self.status_code, self.reason_phrase)
        return self

    def get_header_value(self, name: str) -> str | None:
        """Return the first value of a header, or None when it is absent."""
        values = self._response.headers.get_list(name)
        return values[0] if values else None

    def get_header_values(self, name: str) -> list[str]:
        """
        Return all values of a header in received order.

        Raises:
            HeaderNotFoundError: If the header is absent
        """
        if name not in self._response.headers:
            raise HeaderNotFoundError(name)
        return self._response.headers.get_list(name)

    def try_get_header_values(self, name: str) -> tuple[bool, list[str]]:
        """Return ``(True, values)`` when the header is present, else ``(False, [])``."""
        if name not in self._response.headers:
            return False, []
        return True, self._response.headers.get_list(name)

    async def deserialize_json_content(
        self, target: Any = Any, options: JsonOptions | None = None
    ) -> Any:
        """
        Read the body and deserialize it from JSON.

        Streamed responses are read from the transport; buffered ones are used
        as they are. Unread responses must come from an async transport.
        Cancelling the awaiting task aborts the read and raises
        ``asyncio.CancelledError``; the body still counts as consumed.

        Args:
            target: Type to validate into (pydantic model, dataclass, dict, list[...], Any)
            options: JSON options; only ``strict`` applies

        Returns:
            The deserialized value

        Raises:
            ContentConsumedError: If the body was already taken through this wrapper
            TransportReadError: If reading the body from the transport fails
            SerializationError: If the body is not valid JSON for the target
        """
        if self._content_consumed:
            raise ContentConsumedError()
        # Claimed before the first await so concurrent callers see it.
        self._content_consumed = True

        if not self._response.is_stream_consumed and not isinstance(
            self._response.stream, httpx.AsyncByteStream
        ):
            logger.warning("Response content is not readable asynchronously")
            raise TransportReadError(
                "Cannot read a sync-streamed response asynchronously; read it before wrapping"
            )

        try:
            body = await self._response.aread()
        except (httpx.TransportError, httpx.DecodingError, httpx.StreamError) as e:
            logger.warning("Failed to read response content", error=str(e))
            raise TransportReadError(f"Failed to read response content: {e}") from e

        data: bytes | str = body
        charset = self._response.charset_encoding
        if charset and charset.lower().replace("_", "-") not in ("utf-8", "utf8"):
            try:
                data = body.decode(charset)
            except (LookupError, UnicodeDecodeError) as e:
                raise SerializationError(f"Cannot decode response content as {charset}: {e}") from e

        logger.debug(
            "Deserializing JSON content",
            target=getattr(target, "__name__", str(target)),
            size=len(body),
        )
        return loads(data, target, options)
