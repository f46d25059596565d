"""Conversation context objects.

In order to build and track a conversation with the completion
provider, this module defines the data classes for chat entries, the
structured assistant payload, the per-turn page context, and the
:class:`ConversationStore` that holds the entries of one session.
The store can be converted into the message list expected by
``LLMClient.chat_completion``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import ASSISTANT_PLACEHOLDER, UNKNOWN_LANGUAGE


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class DisplayKind(str, Enum):
    """How the renderer should present an entry."""
    PLAIN_TEXT = "text"
    STRUCTURED_MARKDOWN = "markdown"


class AssistantPayload(BaseModel):
    """Decoded ``output`` object of an assistant reply.

    Every field is optional.  Values are stored as the provider sent
    them, except that JSON arrays become tuples; the parser builds
    instances with ``model_construct`` so no other coercion takes place.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    feedback: Optional[str] = None
    hints: Optional[Tuple[str, ...]] = None
    snippet: Optional[str] = None
    programming_language: Optional[str] = Field(default=None, alias="programmingLanguage")

    def is_empty(self) -> bool:
        """Return True if the reply carried none of the four fields."""
        return all(
            value is None
            for value in (self.feedback, self.hints, self.snippet, self.programming_language)
        )


@dataclass(frozen=True)
class SessionContext:
    """Situational context read from the host page for one turn."""
    problem_statement: str
    programming_language: str = UNKNOWN_LANGUAGE
    user_code: str = ""


@dataclass(frozen=True)
class ChatEntry:
    """One turn in the conversation.  Immutable once created."""
    role: Role
    display_kind: DisplayKind
    raw_message: str
    assistant_payload: Optional[AssistantPayload] = None

    @classmethod
    def user(cls, text: str) -> "ChatEntry":
        return cls(role=Role.USER, display_kind=DisplayKind.PLAIN_TEXT, raw_message=text)

    @classmethod
    def assistant(cls, payload: AssistantPayload) -> "ChatEntry":
        return cls(
            role=Role.ASSISTANT,
            display_kind=DisplayKind.STRUCTURED_MARKDOWN,
            raw_message=ASSISTANT_PLACEHOLDER,
            assistant_payload=payload,
        )

    def to_message(self) -> Dict[str, Any]:
        """Convert the entry into a provider history message."""
        return {"role": self.role.value, "content": self.raw_message}


class ConversationStore:
    """Append-only, chronologically ordered chat entries of a session."""

    def __init__(self) -> None:
        self._entries: List[ChatEntry] = []

    def append(self, entry: ChatEntry) -> None:
        """Append an entry to the tail of the conversation."""
        if not isinstance(entry, ChatEntry):
            raise TypeError(f"expected ChatEntry, got {type(entry).__name__}")
        self._entries.append(entry)

    def snapshot(self) -> Tuple[ChatEntry, ...]:
        """Return the full ordered sequence of entries, oldest first."""
        return tuple(self._entries)

    def to_messages(self) -> List[Dict[str, Any]]:
        """Convert the conversation into a list of message dictionaries."""
        return [entry.to_message() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ChatEntry]:
        return iter(self.snapshot())


__all__ = [
    "Role",
    "DisplayKind",
    "AssistantPayload",
    "SessionContext",
    "ChatEntry",
    "ConversationStore",
]
