"""Abstract interface for LLM clients.

This module defines the :class:`LLMClient` abstract base class used by
the completion provider implementation.  A client must implement a
``chat_completion`` method that accepts a list of message dictionaries
([{role: str, content: str}]), a ``model`` name, a ``temperature``, and
any additional keyword arguments.  The method returns an object with a
``choices`` attribute following OpenAI's response schema, where
``choices[0].message.content`` contains the generated text.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    model_name: str = ""

    @abstractmethod
    def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model: str,
        temperature: float = 1.0,
        **kwargs: Any,
    ) -> Any:
        """Generate a chat completion.

        Parameters
        ----------
        messages : list of dict
            Messages in the conversation.  Each dict must have a
            ``role`` (``"system"``, ``"user"`` or ``"assistant"``) and
            ``content`` (the text of the message).
        model : str
            Identifier for the model variant.
        temperature : float, optional
            Sampling temperature.
        **kwargs : Any
            Provider options such as ``response_format``.

        Returns
        -------
        Any
            A provider response object.  Consumers access
            ``response.choices[0].message.content`` for the text.

        Raises
        ------
        chatbox.errors.ProviderError
            If the exchange fails.  Authentication and transport
            failures raise the dedicated subclasses.
        """
        raise NotImplementedError
