"""Context extractor for LeetCode problem pages.

The page HTML is parsed with BeautifulSoup on every call to
:meth:`LeetCodeExtractor.extract`, since the editor contents change
between turns.  The selectors below are tied to LeetCode's markup and
the Monaco editor it embeds.
"""

import logging
from typing import Callable, Optional, Union

import requests
from bs4 import BeautifulSoup

from ..context import SessionContext
from ..models import DEFAULT_PROBLEM_STATEMENT, UNKNOWN_LANGUAGE
from ..utils.page_fetch import fetch_page
from .base import ContextExtractor

logger = logging.getLogger(__name__)

# One element per rendered editor line
CODE_LINE_SELECTOR = ".view-line"

# The button showing the selected language above the editor
LANGUAGE_SELECTOR = (
    "button.rounded.items-center.whitespace-nowrap.inline-flex.bg-transparent"
    r".dark\:bg-dark-transparent.text-text-secondary.group"
)

DESCRIPTION_SELECTOR = 'meta[name="description"]'

DocumentLoader = Callable[[], Union[str, bytes]]


class LeetCodeExtractor(ContextExtractor):
    """Read the problem, selected language and editor code from a page.

    Parameters
    ----------
    load_document : callable
        Returns the current page HTML each time it is called.
    problem_statement : str, optional
        Problem statement supplied by the host.  When omitted the page's
        ``<meta name="description">`` is used, and failing that a
        placeholder text.
    """

    def __init__(self, load_document: DocumentLoader, problem_statement: Optional[str] = None) -> None:
        self.load_document = load_document
        self.problem_statement = problem_statement

    @classmethod
    def from_html(cls, html: Union[str, bytes], problem_statement: Optional[str] = None) -> "LeetCodeExtractor":
        return cls(lambda: html, problem_statement)

    @classmethod
    def from_file(cls, file: str, problem_statement: Optional[str] = None) -> "LeetCodeExtractor":
        def load() -> str:
            with open(file, "r", encoding="utf-8") as f:
                return f.read()

        return cls(load, problem_statement)

    @classmethod
    def from_url(
        cls,
        url: str,
        problem_statement: Optional[str] = None,
        session: Optional[requests.Session] = None,
        cookie: Optional[str] = None,
    ) -> "LeetCodeExtractor":
        return cls(lambda: fetch_page(url, session=session, cookie=cookie), problem_statement)

    def extract(self) -> SessionContext:
        soup = BeautifulSoup(self.load_document(), "html.parser")
        context = SessionContext(
            problem_statement=self._problem_statement(soup),
            programming_language=extract_language(soup),
            user_code=extract_code(soup),
        )
        logger.debug(
            "[LeetCodeExtractor] language=%s code_lines=%d",
            context.programming_language,
            len(soup.select(CODE_LINE_SELECTOR)),
        )
        return context

    def _problem_statement(self, soup: BeautifulSoup) -> str:
        if self.problem_statement is not None:
            return self.problem_statement
        meta = soup.select_one(DESCRIPTION_SELECTOR)
        if meta is not None and meta.get("content"):
            return meta["content"]
        return DEFAULT_PROBLEM_STATEMENT


def extract_code(soup: BeautifulSoup) -> str:
    """Join the text of every editor line, in document order."""
    return "\n".join(line.get_text() for line in soup.select(CODE_LINE_SELECTOR))


def extract_language(soup: BeautifulSoup) -> str:
    """Return the label of the language selector, or ``UNKNOWN``."""
    button = soup.select_one(LANGUAGE_SELECTOR)
    if button is None:
        return UNKNOWN_LANGUAGE
    return button.get_text() or UNKNOWN_LANGUAGE


__all__ = ["LeetCodeExtractor", "extract_code", "extract_language"]
