"""Data models for SimpleHttp."""

from enum import Enum


class HttpMethod(str, Enum):
    """Standard HTTP request methods.

    Builders accept any verb token; these members cover the common ones.
    """

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    def __str__(self) -> str:
        return self.value
