"""Core building blocks shared across the package."""

from .exceptions import MalformedInputError, OrchestratorError, TransportError, UsageError

__all__ = ["OrchestratorError", "UsageError", "MalformedInputError", "TransportError"]
