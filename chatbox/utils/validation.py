"""
Validation helpers.

Light-weight runtime checks for user input and provider replies.
Failures raise ``ValueError`` (or one of its subclasses from
:mod:`chatbox.errors`).
"""

import json
from typing import Any

from ..errors import MalformedJson


def is_blank(value: Any) -> bool:
    """Return True if *value* is None, empty, or only whitespace."""
    if value is None:
        return True
    return not str(value).strip()


def validate_json(value: str, message: str = "Invalid JSON") -> Any:
    """Parse a string as JSON, raising :class:`MalformedJson` if it fails."""
    try:
        return json.loads(value)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedJson(f"{message}: {e}") from e
