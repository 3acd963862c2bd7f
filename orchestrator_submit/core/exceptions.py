"""Exception types raised by the orchestrator submitter."""

from __future__ import annotations

from typing import Optional


class OrchestratorError(Exception):
    """Base class for all errors raised by this package."""


class UsageError(OrchestratorError):
    """A required command line argument was not supplied."""


class MalformedInputError(OrchestratorError):
    """Caller supplied input could not be parsed into the expected shape."""


class TransportError(OrchestratorError):
    """The request could not be delivered or no response was received.

    ``cause`` holds the underlying :mod:`requests` exception so callers can
    tell a refused connection from a timeout or DNS failure.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


__all__ = ["OrchestratorError", "UsageError", "MalformedInputError", "TransportError"]
