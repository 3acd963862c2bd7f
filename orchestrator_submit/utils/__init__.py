"""Utility helpers for the orchestrator submitter."""

from .json_utils import parse_json_object, pretty_json
from .redaction import REDACTED, redact_passwords

__all__ = [
    "parse_json_object",
    "pretty_json",
    "REDACTED",
    "redact_passwords",
]
