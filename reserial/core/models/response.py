from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import httpx


class Response(Protocol):
    """
    Response metadata consumed by the serializers.

    Only the status code and headers are read. `httpx.Response`,
    `requests.Response` and `ResponseHead` all satisfy this protocol.
    The header mapping is expected to be case-insensitive.
    """
    status_code: int
    headers: Mapping[str, str]


@dataclass(frozen=True)
class ResponseHead:
    """
    Minimal, immutable response descriptor: status line and headers.
    """
    status_code: int
    """
    HTTP status code of the completed transaction.
    """

    headers: httpx.Headers = field(default_factory=httpx.Headers)
    """
    Response headers. Lookups are case-insensitive.
    """

    def __post_init__(self):
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers))

    @classmethod
    def of(cls, status_code: int, headers: Mapping[str, str] | None = None) -> "ResponseHead":
        return cls(status_code=status_code, headers=httpx.Headers(headers or {}))
