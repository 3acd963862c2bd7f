"""HTTP client bound to a single orchestrator endpoint."""
from __future__ import annotations

import json
import logging
import platform
from http.cookiejar import DefaultCookiePolicy
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlencode

import requests
from requests.structures import CaseInsensitiveDict

from orchestrator_submit import __version__
from orchestrator_submit.core.exceptions import TransportError
from orchestrator_submit.models.connection import (
    DEFAULT_HOST_ADDRESS,
    DEFAULT_PORT,
    FORM_CONTENT_TYPE,
    BodyFormat,
    Connection,
    HttpMethod,
    LoggingPolicy,
)
from orchestrator_submit.utils.json_utils import pretty_json
from orchestrator_submit.utils.redaction import redact_passwords

logger = logging.getLogger(__name__)

USER_AGENT = f"orchestrator-submit/{__version__} Python/{platform.python_version()}"

Body = Union[Mapping[str, Any], list, tuple, str, bytes, None]
Message = Union[requests.PreparedRequest, requests.Response]


class RequestClient:
    """Issue GET/POST/PUT/DELETE requests against one host, port and scheme.

    The connection is fixed for the lifetime of the client. ``cookie`` may be
    set or cleared between calls and is sent with every request while set.
    Requests and responses are logged at DEBUG level with passwords redacted
    from the request line.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST_ADDRESS,
        port: int = DEFAULT_PORT,
        use_tls: bool = False,
        timeout: Optional[float] = None,
        *,
        logging_policy: Optional[LoggingPolicy] = None,
        cookie: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._connection = Connection(host=host, port=port, use_tls=use_tls, timeout=timeout)
        self.logging_policy = logging_policy or LoggingPolicy()
        self.cookie = cookie
        self.session = session or requests.Session()
        # Only the cookie set on the client is sent; server Set-Cookie headers are not kept.
        self.session.cookies.clear()
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        logger.debug("RequestClient initialized for %s", self)

    @classmethod
    def from_connection(cls, connection: Connection, **kwargs: Any) -> "RequestClient":
        return cls(
            host=connection.host,
            port=connection.port,
            use_tls=connection.use_tls,
            timeout=connection.timeout,
            **kwargs,
        )

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def base_url(self) -> str:
        return self._connection.base_url

    def __str__(self) -> str:
        return self._connection.base_url

    def __repr__(self) -> str:
        return f"RequestClient({self._connection.base_url!r})"

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------
    def __enter__(self) -> "RequestClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self.session.close()

    # ------------------------------------------------------------------
    # Public verbs
    # ------------------------------------------------------------------
    def get(self, path: str, headers: Optional[Mapping[str, str]] = None) -> requests.Response:
        return self.request(HttpMethod.GET, path, headers=headers)

    def delete(self, path: str, headers: Optional[Mapping[str, str]] = None) -> requests.Response:
        return self.request(HttpMethod.DELETE, path, headers=headers)

    def post(
        self, path: str, body: Body, headers: Optional[Mapping[str, str]] = None
    ) -> requests.Response:
        return self.request(HttpMethod.POST, path, body=body, headers=headers)

    def put(
        self, path: str, body: Body, headers: Optional[Mapping[str, str]] = None
    ) -> requests.Response:
        return self.request(HttpMethod.PUT, path, body=body, headers=headers)

    def request(
        self,
        method: Union[HttpMethod, str],
        path: str,
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> requests.Response:
        """Build, send and log a single request and return the raw response.

        Status codes are not inspected. Failures to reach the server are
        raised as :class:`TransportError`.
        """
        method = HttpMethod(method.upper() if isinstance(method, str) else method)
        path = self.normalize_path(path)
        request_headers = CaseInsensitiveDict(headers or {})
        request_headers["User-Agent"] = USER_AGENT
        if self.cookie:
            request_headers["Cookie"] = self.cookie

        data = None
        if method.permits_body:
            data = self._encode_body(body, request_headers)

        url = f"{self.base_url}{path}"
        try:
            prepared = self.session.prepare_request(
                requests.Request(method.value, url, headers=request_headers, data=data)
            )
            self._log_request(prepared, path)
            response = self.session.send(prepared, timeout=self._connection.timeout)
        except requests.RequestException as exc:
            logger.debug("%s %s failed: %s", method.value, url, exc)
            raise TransportError(f"{method.value} {url} failed: {exc}", cause=exc) from exc

        self._log_response(response)
        return response

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def normalize_path(self, path: str) -> str:
        """Return ``path`` relative to this client's base URL with one leading slash."""
        if path.startswith(self.base_url):
            rest = path[len(self.base_url):]
            if not rest or rest[0] in "/?#":
                path = rest
        return "/" + path.lstrip("/")

    @staticmethod
    def _encode_body(body: Body, headers: CaseInsensitiveDict) -> Any:
        content_type = headers.get("Content-Type")
        if not content_type:
            content_type = headers["Content-Type"] = FORM_CONTENT_TYPE

        body_format = BodyFormat.from_content_type(content_type)
        if body_format is BodyFormat.FORM_ENCODED:
            if body is None:
                return ""
            if isinstance(body, (str, bytes)):
                return body
            pairs = body.items() if isinstance(body, Mapping) else body
            return urlencode(list(pairs))
        if body_format is BodyFormat.JSON and isinstance(body, (Mapping, list, tuple)):
            return json.dumps(body, separators=(",", ":"))
        return body

    def format_body_for_log(self, message: Message) -> str:
        """Render a request or response body for a log line.

        JSON bodies are returned as text, indented when pretty printing is
        enabled. Anything else is quoted so it stays on a single line.
        """
        text = _body_text(message)
        content_type = message.headers.get("Content-Type")
        if BodyFormat.from_content_type(content_type) is BodyFormat.JSON:
            if self.logging_policy.pretty_print_body:
                pretty = pretty_json(text)
                if pretty is not None:
                    return "\n" + pretty
            return text
        return repr(text)

    def _log_request(self, prepared: requests.PreparedRequest, path: str) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        line = f"REQUEST: {prepared.method} {self}{path} HEADERS: {dict(prepared.headers)!r}"
        if self.logging_policy.log_request_body and HttpMethod(prepared.method).permits_body:
            line += f" BODY: {self.format_body_for_log(prepared)}"
        logger.debug(redact_passwords(line))

    def _log_response(self, response: requests.Response) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        line = (
            f"RESPONSE: {response.status_code} {response.reason} "
            f"HEADERS: {dict(response.headers)!r}"
        )
        if self.logging_policy.log_response_body:
            line += f" BODY: {self.format_body_for_log(response)}"
        logger.debug(line)


def _body_text(message: Message) -> str:
    if isinstance(message, requests.Response):
        raw = message.content
    else:
        raw = message.body
    if raw is None:
        return ""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return str(raw)


__all__ = ["RequestClient", "USER_AGENT"]
