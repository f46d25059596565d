"""Extractor returning a fixed context.

Useful when the host already knows the problem and code (for example a
command-line wrapper or a test) and there is no page to read.
"""

from dataclasses import replace
from typing import Optional

from ..context import SessionContext
from ..models import DEFAULT_PROBLEM_STATEMENT, UNKNOWN_LANGUAGE
from .base import ContextExtractor


class StaticExtractor(ContextExtractor):
    def __init__(
        self,
        context: Optional[SessionContext] = None,
        *,
        problem_statement: str = DEFAULT_PROBLEM_STATEMENT,
        programming_language: str = UNKNOWN_LANGUAGE,
        user_code: str = "",
    ) -> None:
        self.context = context or SessionContext(
            problem_statement=problem_statement,
            programming_language=programming_language or UNKNOWN_LANGUAGE,
            user_code=user_code,
        )

    def extract(self) -> SessionContext:
        return self.context

    def update(self, **changes: str) -> None:
        """Replace some fields of the held context, e.g. ``user_code``."""
        self.context = replace(self.context, **changes)


__all__ = ["StaticExtractor"]
