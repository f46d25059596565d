"""Exception hierarchy for the chat session engine.

Components raise these; the :class:`chatbox.session.SessionController`
absorbs them at the turn boundary so that no failure escapes to the
hosting page.  Provider failures derive from ``RuntimeError`` and
reply-shape failures from ``ValueError`` so callers that only know the
built-in types still catch them.
"""

from typing import Optional


class ChatboxError(Exception):
    """Base class for every error raised by the engine."""


class CredentialMissing(ChatboxError):
    """No secret is available for the completion provider."""

    def __init__(self, message: str = "OpenAI API Key is required") -> None:
        super().__init__(message)


class ProviderError(ChatboxError, RuntimeError):
    """The completion exchange failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderAuthenticationError(ProviderError):
    """The provider rejected the credential."""


class ProviderTransportError(ProviderError):
    """The provider could not be reached or the connection dropped."""


class EmptyCompletion(ChatboxError):
    """The provider answered without any message content."""


class ParseError(ChatboxError, ValueError):
    """The reply did not satisfy the structural contract."""


class MalformedJson(ParseError):
    """The reply is not valid JSON."""


class MissingOutputField(ParseError):
    """The reply is JSON but has no top-level ``output`` key."""


__all__ = [
    "ChatboxError",
    "CredentialMissing",
    "ProviderError",
    "ProviderAuthenticationError",
    "ProviderTransportError",
    "EmptyCompletion",
    "ParseError",
    "MalformedJson",
    "MissingOutputField",
]
