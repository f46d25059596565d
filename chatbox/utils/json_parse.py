"""
JSON parsing utilities.

Simple helpers to safely pull values out of decoded JSON objects
without assuming their shape.
"""

from typing import Any, Dict, Iterable, Optional


def get_value(data: Any, key: str, default: Optional[Any] = None) -> Any:
    """Safely get a value from a dict, returning a default if the key is missing.

    Non-dict inputs yield the default.
    """
    if not isinstance(data, dict):
        return default
    return data.get(key, default)


def pick(data: Any, keys: Iterable[str]) -> Dict[str, Any]:
    """Return the subset of *data* whose keys are listed in *keys*."""
    if not isinstance(data, dict):
        return {}
    return {key: data[key] for key in keys if key in data}
