"""Helpers that keep credentials out of log output."""

import re

REDACTED = "*REDACTED*"

# ``password=<value>`` in form encoded content. The key must not be part of a
# longer name such as ``confirm_password`` or ``user[password]``.
_FORM_PASSWORD = re.compile(r"(?<![\w\[\].%-])(password=)[^&\s'\"]*")

# ``"password": <value>`` in JSON content, string or bare scalar values.
_JSON_PASSWORD = re.compile(r'("password"\s*:\s*)(?:"(?:[^"\\]|\\.)*(?:"|$)|[^,}\]\s]+)')


def redact_passwords(text: str) -> str:
    """Return ``text`` with every password value replaced by ``*REDACTED*``.

    Only log output should be passed through here; request bodies are sent
    untouched.
    """
    if not text:
        return text
    text = _FORM_PASSWORD.sub(lambda m: m.group(1) + REDACTED, text)
    return _JSON_PASSWORD.sub(lambda m: f'{m.group(1)}"{REDACTED}"', text)


__all__ = ["REDACTED", "redact_passwords"]
