"""SimpleHttp

A fluent request builder and a thin response wrapper over httpx.

Example:
    ```python
    import httpx
    from simplehttp import (
        HttpMethod,
        SimpleHttpRequestBuilder,
        SimpleHttpResponse,
    )

    request = (
        SimpleHttpRequestBuilder(HttpMethod.POST, "https://api.example.com/users")
        .with_bearer_token("access-token")
        .with_json_body({"FirstName": "John", "LastName": "Smith"})
        .build()
    )

    async with httpx.AsyncClient() as client:
        response = SimpleHttpResponse(await client.send(request))
        user = await response.ensure_success_status_code().deserialize_json_content(User)
    ```
"""

from .builder import SimpleHttpRequestBuilder
from .client import SimpleHttpClient
from .config import (
    DEFAULT_BEARER_PREFIX,
    JSON_CONTENT_TYPE,
    JsonOptions,
    SimpleHttpConfig,
)
from .exceptions import (
    ContentConsumedError,
    HeaderNotFoundError,
    InvalidHeaderError,
    InvalidUriError,
    SerializationError,
    SimpleHttpError,
    TransportError,
    TransportReadError,
    UnsuccessfulResponseError,
)
from .models import HttpMethod
from .response import SimpleHttpResponse

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Builder / Response
    "SimpleHttpRequestBuilder",
    "SimpleHttpResponse",
    # Client
    "SimpleHttpClient",
    # Configuration
    "SimpleHttpConfig",
    "JsonOptions",
    "DEFAULT_BEARER_PREFIX",
    "JSON_CONTENT_TYPE",
    # Enums
    "HttpMethod",
    # Exceptions
    "SimpleHttpError",
    "InvalidUriError",
    "InvalidHeaderError",
    "SerializationError",
    "UnsuccessfulResponseError",
    "HeaderNotFoundError",
    "ContentConsumedError",
    "TransportError",
    "TransportReadError",
]
