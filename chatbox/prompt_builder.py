"""System prompt construction.

The :class:`PromptBuilder` holds a template containing ``{{name}}``
placeholders and fills it with the fields of a
:class:`chatbox.context.SessionContext` to produce the system message
of a turn.
"""

import logging
import re
from os import path
from typing import Dict, List, Optional

from .context import SessionContext

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

DEFAULT_TEMPLATE_FILE = "prompts/system_prompt.md"

# Fields substituted into the template, in substitution order
CONTEXT_FIELDS = ("problem_statement", "programming_language", "user_code")


class PromptBuilder:
    """Fill a system prompt template from a session context."""

    def __init__(self, template: Optional[str] = None) -> None:
        """Initialize a new prompt builder.

        Parameters
        ----------
        template : str, optional
            The template text.  Placeholders of the form ``{{name}}``
            are replaced by :meth:`build`.  If omitted, the packaged
            ``prompts/system_prompt.md`` is used.
        """
        self.template: str = template if template is not None else self.load_prompt(DEFAULT_TEMPLATE_FILE)
        self.placeholders: List[str] = self._get_place_holder()

    def build(self, context: SessionContext) -> str:
        """Return the template with the context fields substituted."""
        values = {name: str(getattr(context, name)) for name in CONTEXT_FIELDS}
        return self.fill(values)

    def fill(self, values: Dict[str, str]) -> str:
        """Replace the first occurrence of each placeholder named in *values*.

        The template is scanned once from left to right, so text coming
        from a substituted value is never itself treated as a
        placeholder.  Placeholders without a value, and repeated
        occurrences of one already filled, are left untouched.
        """
        filled = set()

        def substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in values and name not in filled:
                filled.add(name)
                return values[name]
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(substitute, self.template)

    def _get_place_holder(self) -> List[str]:
        """Extract placeholder names from the template, in order of first appearance."""
        names: List[str] = []
        for name in PLACEHOLDER_PATTERN.findall(self.template):
            if name not in names:
                names.append(name)
        missing = [name for name in CONTEXT_FIELDS if name not in names]
        if missing:
            logger.debug("[PromptBuilder] template has no placeholder for %s", ", ".join(missing))
        return names

    @staticmethod
    def load_prompt(file: str) -> str:
        """Load a prompt from a file.

        Relative paths are resolved against this module's directory so
        that files under ``chatbox/prompts`` are found.
        """
        if not path.isabs(file):
            current_dir = path.dirname(path.abspath(__file__))
            file = path.join(current_dir, file)
        with open(file, "r", encoding="utf-8") as f:
            return f.read()


__all__ = ["PromptBuilder", "PLACEHOLDER_PATTERN", "CONTEXT_FIELDS"]
