"""Context extractor registry.

This subpackage contains one module per supported host page.  The
``DEFAULT_EXTRACTORS`` mapping associates short names with extractor
classes; use :func:`get_extractor` to instantiate one by name.
"""

from typing import Any, Dict, Type

from .base import ContextExtractor
from .leetcode import LeetCodeExtractor
from .static import StaticExtractor

# Map short host names to their extractor classes.  New hosts should
# be inserted here.
DEFAULT_EXTRACTORS: Dict[str, Type[ContextExtractor]] = {
    "leetcode": LeetCodeExtractor,
    "static": StaticExtractor,
}


def get_extractor(name: str, *args: Any, **kwargs: Any) -> ContextExtractor:
    """Instantiate the extractor registered under *name*."""
    cls = DEFAULT_EXTRACTORS.get(name)
    if cls is None:
        raise ValueError(f"Unknown host page: {name}")
    return cls(*args, **kwargs)


__all__ = [
    "ContextExtractor",
    "LeetCodeExtractor",
    "StaticExtractor",
    "DEFAULT_EXTRACTORS",
    "get_extractor",
]
