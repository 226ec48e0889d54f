"""Async sender that pairs the request builder with the response wrapper."""

from typing import Any

import httpx
import structlog

from .builder import SimpleHttpRequestBuilder
from .config import SimpleHttpConfig
from .exceptions import InvalidUriError, TransportError
from .models import HttpMethod
from .response import SimpleHttpResponse

logger = structlog.get_logger(__name__)


class SimpleHttpClient:
    """
    Async client that sends built requests and wraps the responses.

    Retries, redirects and connection pooling are whatever the underlying
    ``httpx.AsyncClient`` does.

    Example:
        ```python
        from simplehttp import HttpMethod, SimpleHttpClient, SimpleHttpConfig

        config = SimpleHttpConfig(base_url="https://api.example.com")
        async with SimpleHttpClient(config) as client:
            builder = client.request(HttpMethod.GET, "/users/42").with_bearer_token(token)
            response = await client.send(builder)
            user = await response.ensure_success_status_code().deserialize_json_content(User)
        ```
    """

    def __init__(self, config: SimpleHttpConfig | None = None) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration. If None, uses default config.
        """
        self.config = config or SimpleHttpConfig()
        self._client: httpx.AsyncClient | None = None
        logger.info("SimpleHttpClient initialized", base_url=self.config.base_url)

    async def __aenter__(self) -> "SimpleHttpClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                headers=self.config.headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("SimpleHttpClient closed")

    def request(
        self, method: HttpMethod | str = HttpMethod.GET, uri: httpx.URL | str | None = None
    ) -> SimpleHttpRequestBuilder:
        """Start a new request builder."""
        return SimpleHttpRequestBuilder(method, uri)

    async def send(
        self,
        request: httpx.Request | SimpleHttpRequestBuilder,
        *,
        stream: bool = False,
    ) -> SimpleHttpResponse:
        """
        Send a request and wrap the response.

        Relative URLs resolve against ``config.base_url`` and the configured
        default headers are added. With ``stream=True`` the body is left unread
        and the caller must close the raw response.

        Args:
            request: A built request or a builder to build
            stream: Whether to defer reading the response body

        Returns:
            The wrapped response, whatever its status code

        Raises:
            InvalidUriError: If the request URL cannot be sent
            TransportError: If the transport fails before a response arrives
        """
        if isinstance(request, SimpleHttpRequestBuilder):
            request = request.build()

        client = self._get_client()
        prepared = client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.content or None,
        )

        logger.debug("Sending request", method=prepared.method, url=str(prepared.url))
        try:
            response = await client.send(prepared, stream=stream)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidUriError(str(prepared.url), f"Cannot send request to {prepared.url}: {e}") from e
        except httpx.TransportError as e:
            logger.error("Request failed", method=prepared.method, url=str(prepared.url), error=str(e))
            raise TransportError(f"Request to {prepared.url} failed: {e}") from e

        logger.debug(
            "Response received",
            method=prepared.method,
            url=str(prepared.url),
            status_code=response.status_code,
        )
        return SimpleHttpResponse(response)
