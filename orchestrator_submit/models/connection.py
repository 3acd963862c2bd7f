"""Connection and logging settings for :class:`RequestClient`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_HOST_ADDRESS = "localhost"
DEFAULT_PORT = 3000

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def permits_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


class BodyFormat(Enum):
    """How a PUT/POST body is encoded before it is sent."""

    FORM_ENCODED = "form"
    JSON = "json"
    RAW = "raw"

    @classmethod
    def from_content_type(cls, content_type: Optional[str]) -> "BodyFormat":
        """Pick the encoding for ``content_type``.

        Parameters such as ``; charset=utf-8`` are ignored. A missing
        content type means form encoding.
        """
        if not content_type:
            return cls.FORM_ENCODED
        media_type = content_type.split(";", 1)[0].strip().lower()
        return _BODY_FORMATS.get(media_type, cls.RAW)


_BODY_FORMATS = {
    FORM_CONTENT_TYPE: BodyFormat.FORM_ENCODED,
    JSON_CONTENT_TYPE: BodyFormat.JSON,
}


@dataclass(frozen=True)
class Connection:
    """Endpoint a client talks to. Fixed once constructed."""

    host: str = DEFAULT_HOST_ADDRESS
    port: int = DEFAULT_PORT
    use_tls: bool = False
    timeout: Optional[float] = None
    base_url: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "port", int(self.port))
        scheme = "https" if self.use_tls else "http"
        object.__setattr__(self, "base_url", f"{scheme}://{self.host}:{self.port}")


@dataclass(frozen=True)
class LoggingPolicy:
    """Controls how much of each exchange ends up in the debug log."""

    log_request_body: bool = False
    log_response_body: bool = False
    pretty_print_body: bool = False


__all__ = [
    "DEFAULT_HOST_ADDRESS",
    "DEFAULT_PORT",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "HttpMethod",
    "BodyFormat",
    "Connection",
    "LoggingPolicy",
]
