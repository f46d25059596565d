"""Completion provider clients.

The engine talks to a single provider.  :class:`LLMClient` is the
interface the :class:`chatbox.completion.CompletionClient` depends on,
so tests can substitute a dummy client; :class:`OpenAIClient` is the
implementation used in production.
"""

from .llm_client import LLMClient
from .openai_client import OpenAIClient

__all__ = ["LLMClient", "OpenAIClient"]
