from .context import AssistantPayload, ChatEntry, ConversationStore, DisplayKind, Role, SessionContext
from .credentials import CredentialStore, EnvCredentialStore, InMemoryCredentialStore
from .completion import CompletionClient
from .errors import (
    ChatboxError,
    CredentialMissing,
    EmptyCompletion,
    MalformedJson,
    MissingOutputField,
    ParseError,
    ProviderAuthenticationError,
    ProviderError,
    ProviderTransportError,
)
from .extractors import ContextExtractor, LeetCodeExtractor, StaticExtractor, get_extractor
from .prompt_builder import PromptBuilder
from .providers import LLMClient, OpenAIClient
from .response_parser import ResponseParser, parse_response
from .session import SessionController, SessionState, TurnOutcome

__all__ = [
    "AssistantPayload",
    "ChatEntry",
    "ConversationStore",
    "DisplayKind",
    "Role",
    "SessionContext",
    "CredentialStore",
    "EnvCredentialStore",
    "InMemoryCredentialStore",
    "CompletionClient",
    "ChatboxError",
    "CredentialMissing",
    "EmptyCompletion",
    "MalformedJson",
    "MissingOutputField",
    "ParseError",
    "ProviderAuthenticationError",
    "ProviderError",
    "ProviderTransportError",
    "ContextExtractor",
    "LeetCodeExtractor",
    "StaticExtractor",
    "get_extractor",
    "PromptBuilder",
    "LLMClient",
    "OpenAIClient",
    "ResponseParser",
    "parse_response",
    "SessionController",
    "SessionState",
    "TurnOutcome",
]
