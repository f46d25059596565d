"""Request/response exchange with the completion provider.

The :class:`CompletionClient` turns a built system prompt, the
conversation history and the new user turn into the provider message
sequence, sends it with the fixed model and JSON-object response
format, and returns the raw text of the first choice.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from .context import ChatEntry
from .errors import EmptyCompletion
from .models import DEFAULT_MODEL, DEFAULT_TEMPERATURE, RESPONSE_FORMAT
from .providers.llm_client import LLMClient
from .providers.openai_client import OpenAIClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], LLMClient]


def format_user_turn(user_turn_text: str, extracted_code: str) -> str:
    """Return the content of the final user message of a request."""
    return f"User Prompt: {user_turn_text}\n\nCode: {extracted_code}"


class CompletionClient:
    """Send one turn to the completion provider.

    Parameters
    ----------
    client_factory : callable, optional
        Called with the credential to obtain an :class:`LLMClient`.
        Defaults to :class:`OpenAIClient`.
    model : str, optional
        Model identifier sent with every request.
    """

    def __init__(self, client_factory: Optional[ClientFactory] = None, model: str = DEFAULT_MODEL) -> None:
        self.client_factory: ClientFactory = client_factory or (lambda key: OpenAIClient(api_key=key, model=model))
        self.model = model

    @staticmethod
    def build_messages(
        system_prompt: str,
        history: Sequence[ChatEntry],
        user_turn_text: str,
        extracted_code: str,
    ) -> List[Dict[str, Any]]:
        """Build the provider message sequence.

        One system message, then every prior entry in order with its
        role and raw message, then the new user turn.
        """
        messages: List[Dict[str, Any]] = [{"role": "system", "content": system_prompt}]
        messages.extend(entry.to_message() for entry in history)
        messages.append({"role": "user", "content": format_user_turn(user_turn_text, extracted_code)})
        return messages

    def complete(
        self,
        system_prompt: str,
        history: Sequence[ChatEntry],
        user_turn_text: str,
        extracted_code: str,
        credential: str,
    ) -> str:
        """Run the exchange and return the first choice's content verbatim.

        Raises
        ------
        chatbox.errors.ProviderError
            Propagated from the client on authentication or transport
            failure.
        chatbox.errors.EmptyCompletion
            If the provider returned no choices or no content.
        """
        messages = self.build_messages(system_prompt, history, user_turn_text, extracted_code)
        client = self.client_factory(credential)
        raw_response = client.chat_completion(
            messages=messages,
            model=self.model,
            temperature=DEFAULT_TEMPERATURE,
            response_format=RESPONSE_FORMAT,
        )
        choices = getattr(raw_response, "choices", None) or []
        if not choices:
            raise EmptyCompletion("provider returned no choices")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content:
            raise EmptyCompletion("provider returned no content")
        logger.debug("[CompletionClient] received %d characters", len(content))
        return content


__all__ = ["CompletionClient", "format_user_turn"]
