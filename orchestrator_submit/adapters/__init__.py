"""Adapter package for the orchestrator submitter."""

from .http_client import RequestClient

__all__ = ["RequestClient"]
