import json
import logging
from typing import Any, Dict, Optional, Union

from orchestrator_submit.core.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


def parse_json_object(text: Optional[str], *, strict: bool = False) -> Dict[str, Any]:
    """Return the JSON object encoded in ``text``.

    Missing input yields an empty dict. Malformed JSON or a value that is not
    an object also yields an empty dict unless ``strict`` is set, in which
    case :class:`MalformedInputError` is raised.
    """
    if text is None or not text.strip():
        return {}

    try:
        data = json.loads(text)
    except ValueError as exc:
        if strict:
            raise MalformedInputError(f"additional arguments are not valid JSON: {exc}") from exc
        logger.warning("Ignoring additional arguments that are not valid JSON: %s", exc)
        return {}

    if not isinstance(data, dict):
        if strict:
            raise MalformedInputError(
                f"additional arguments must be a JSON object, got {type(data).__name__}"
            )
        logger.warning("Ignoring additional arguments that are not a JSON object")
        return {}
    return data


def pretty_json(text: Union[str, bytes]) -> Optional[str]:
    """Return ``text`` re-rendered as indented JSON, or ``None`` if it does not parse."""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    try:
        return json.dumps(json.loads(text), indent=2)
    except (TypeError, ValueError):
        logger.debug("Body is not valid JSON; logging it as-is", exc_info=True)
    return None
