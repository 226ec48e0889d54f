"""Configuration for SimpleHttp."""

from dataclasses import dataclass, field

DEFAULT_BEARER_PREFIX = "Bearer"
JSON_MEDIA_TYPE = "application/json"
JSON_CONTENT_TYPE = f"{JSON_MEDIA_TYPE}; charset=utf-8"


@dataclass(frozen=True)
class JsonOptions:
    """
    Options controlling JSON conversion of request and response bodies.

    Attributes:
        indent: Indentation for serialized output, None for compact (default: None)
        sort_keys: Whether to sort object keys when serializing (default: False)
        ensure_ascii: Whether to escape non-ASCII characters (default: False)
        by_alias: Whether pydantic models serialize with field aliases (default: True)
        exclude_none: Whether to drop None-valued model fields (default: False)
        strict: Whether deserialization uses pydantic strict mode (default: False)

    Example:
        ```python
        options = JsonOptions(indent=2, sort_keys=True)
        builder.with_json_body({"b": 1, "a": 2}, options)
        ```
    """

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    by_alias: bool = True
    exclude_none: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate options after initialization."""
        if self.indent is not None and self.indent < 0:
            raise ValueError("indent must be non-negative")

    @property
    def separators(self) -> tuple[str, str]:
        """Item and key separators matching the indentation mode."""
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


@dataclass
class SimpleHttpConfig:
    """
    Configuration for SimpleHttpClient.

    Attributes:
        base_url: Base URL that relative request URIs resolve against (default: "")
        timeout: Request timeout in seconds (default: 5.0)
        verify_ssl: Whether to verify SSL certificates (default: True)
        headers: Headers sent with every request (default: none)

    Example:
        ```python
        config = SimpleHttpConfig(
            base_url="https://api.example.com",
            timeout=10.0,
            headers={"User-Agent": "my-service/1.0"},
        )
        ```
    """

    base_url: str = ""
    timeout: float = 5.0
    verify_ssl: bool = True
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # Remove trailing slash from base_url
        self.base_url = self.base_url.rstrip("/")

        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")
