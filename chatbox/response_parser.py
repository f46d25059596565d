"""Decoding of the provider's structured reply.

A well-formed reply is a JSON object of the shape::

    {"output": {"feedback": ..., "hints": [...], "snippet": ..., "programmingLanguage": ...}}

All four inner fields are optional and their types are taken as the
provider sent them; only the presence of ``output`` is enforced.
"""

from typing import Any

from .context import AssistantPayload
from .errors import MissingOutputField
from .utils.json_parse import get_value, pick
from .utils.validation import validate_json

OUTPUT_KEY = "output"

PAYLOAD_KEYS = {
    "feedback": "feedback",
    "hints": "hints",
    "snippet": "snippet",
    "programmingLanguage": "programming_language",
}


def parse_response(raw: str) -> AssistantPayload:
    """Decode *raw* into an :class:`AssistantPayload`.

    Raises
    ------
    chatbox.errors.MalformedJson
        If *raw* is not valid JSON.
    chatbox.errors.MissingOutputField
        If the decoded value is not an object with an ``output`` key.
    """
    data: Any = validate_json(raw, "Reply is not valid JSON")
    if not isinstance(data, dict) or OUTPUT_KEY not in data:
        raise MissingOutputField(f"Reply has no {OUTPUT_KEY!r} field")
    fields = pick(get_value(data, OUTPUT_KEY), PAYLOAD_KEYS)
    return AssistantPayload.model_construct(
        **{PAYLOAD_KEYS[key]: _freeze(value) for key, value in fields.items()}
    )


def _freeze(value: Any) -> Any:
    """Turn decoded JSON arrays into tuples so stored entries cannot change."""
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


class ResponseParser:
    """Object form of :func:`parse_response`, for injection into a session."""

    def parse(self, raw: str) -> AssistantPayload:
        return parse_response(raw)


__all__ = ["parse_response", "ResponseParser", "OUTPUT_KEY"]
