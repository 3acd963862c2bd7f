"""Shared fixtures for the orchestrator submitter tests."""

from typing import Callable

import pytest
import requests

CONFIG_ENV_VARS = (
    "ORCHESTRATOR_HOST_ADDRESS",
    "ORCHESTRATOR_HOST_PORT",
    "ORCHESTRATOR_USE_TLS",
    "ORCHESTRATOR_TIMEOUT",
    "ORCHESTRATOR_USERNAME",
    "ORCHESTRATOR_PASSWORD",
    "LOG_REQUEST_BODY",
    "LOG_RESPONSE_BODY",
    "LOG_PRETTY_PRINT_BODY",
    "DEBUG",
    "RICH_LOGGING",
    "STRICT_ADDITIONAL_ARGUMENTS",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment and .env files out of the tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("orchestrator_submit.configs.config.load_dotenv", lambda *a, **k: False)


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for canned :class:`requests.Response` objects."""

    def _make(
        status_code: int = 200,
        body: bytes = b"<work_order><id>1</id></work_order>",
        content_type: str = "application/xml",
        reason: str = "OK",
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response._content = body
        response.headers["Content-Type"] = content_type
        return response

    return _make
