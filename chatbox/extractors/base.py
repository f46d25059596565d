"""Abstract interface for context extractors.

An extractor reads the page hosting the assistant and returns the
:class:`chatbox.context.SessionContext` for the current turn.  Each
supported host page gets its own implementation; the session
controller only depends on this interface.
"""

from abc import ABC, abstractmethod

from ..context import SessionContext


class ContextExtractor(ABC):
    """Abstract base class for context extractors."""

    @abstractmethod
    def extract(self) -> SessionContext:
        """Read the host page and return the current context.

        Extraction is read-only and must not raise because an expected
        element is missing; missing values fall back to their defaults.
        """
        raise NotImplementedError
