"""OpenAI client implementation.

This module provides the concrete :class:`LLMClient` for OpenAI's chat
completion endpoint.  A client is bound to one API key; the engine
creates a fresh client for every turn with the secret read at the
start of that turn.  SDK exceptions are translated into the
:mod:`chatbox.errors` provider hierarchy.
"""

import logging
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from ..errors import ProviderAuthenticationError, ProviderError, ProviderTransportError
from ..models import DEFAULT_MODEL
from .llm_client import LLMClient

logger = logging.getLogger(__name__)


class OpenAIClient(LLMClient):
    """Client for the OpenAI Chat Completions API."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, **client_kwargs: Any) -> None:
        self.client = OpenAI(api_key=api_key, **client_kwargs)
        self.model_name = model

    def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model: Optional[str] = None,
        temperature: float = 1.0,
        **kwargs: Any,
    ) -> Any:
        # Build the request payload according to OpenAI's API.
        model_name = model or self.model_name
        request_payload: Dict[str, Any] = {
            "model": model_name,
            "messages": [
                {"role": msg.get("role", "user"), "content": msg.get("content", "")}
                for msg in messages
            ],
            "temperature": temperature,
        }

        # Response format is an OpenAI ``{"type": ...}`` object, sent as-is
        fmt: Optional[Dict[str, Any]] = kwargs.get("response_format")
        if fmt:
            request_payload["response_format"] = fmt

        logger.debug(
            "[OpenAIClient] chat_completion model=%s messages=%d",
            model_name,
            len(request_payload["messages"]),
        )
        try:
            response = self.client.chat.completions.create(**request_payload)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise ProviderAuthenticationError(
                f"OpenAI rejected the API key: {exc}", status_code=exc.status_code
            ) from exc
        except openai.APIConnectionError as exc:
            raise ProviderTransportError(f"OpenAI could not be reached: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ProviderError(
                f"OpenAI chat_completion error: {exc}", status_code=exc.status_code
            ) from exc
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI chat_completion error: {exc}") from exc
        return response


__all__ = ["OpenAIClient"]
