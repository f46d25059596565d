"""Credential stores.

The engine never owns the provider secret.  It asks a
:class:`CredentialStore` for the current value at the start of every
turn and listens to its change channel to know whether a secret is
available at all.  Two stores are provided:

* :class:`InMemoryCredentialStore` – a key-value area keyed by
  ``"apiKey"``, written by the host (for example a settings dialog).
* :class:`EnvCredentialStore` – reads ``OPENAI_API_KEY`` from the
  environment, loading a ``.env`` file first if one exists.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from .models import CREDENTIAL_KEY
from .utils.signals import Signal, Unsubscribe

logger = logging.getLogger(__name__)

# Mapping from provider identifier to the environment variable used
REQUIRED_KEYS = {
    "openai": "OPENAI_API_KEY",
}

CredentialListener = Callable[[Optional[str]], Any]


def has_api_key(provider: str = "openai") -> bool:
    """Return True if the required API key for *provider* is set."""
    env_var = REQUIRED_KEYS.get(provider)
    return bool(os.getenv(env_var)) if env_var else True


class CredentialStore(ABC):
    """Capability to read the provider secret and watch it change."""

    def __init__(self) -> None:
        self._changed = Signal("credential_changed")

    @abstractmethod
    def get(self) -> Optional[str]:
        """Return the current secret, or None if absent."""
        raise NotImplementedError

    def on_change(self, listener: CredentialListener) -> Unsubscribe:
        """Register *listener*; it receives the new secret or None."""
        return self._changed.connect(listener)

    def _notify(self, value: Optional[str]) -> None:
        self._changed.emit(value or None)


class InMemoryCredentialStore(CredentialStore):
    """Key-value credential area held in process memory."""

    def __init__(self, initial: Optional[str] = None, key: str = CREDENTIAL_KEY) -> None:
        super().__init__()
        self.key = key
        self._area: Dict[str, str] = {}
        if initial:
            self._area[key] = initial

    def get(self) -> Optional[str]:
        return self._area.get(self.key) or None

    def set(self, value: Optional[str]) -> None:
        """Store a new secret and notify listeners if it changed."""
        previous = self.get()
        if value:
            self._area[self.key] = value
        else:
            self._area.pop(self.key, None)
        if previous != self.get():
            self._notify(self.get())

    def clear(self) -> None:
        self.set(None)


class EnvCredentialStore(CredentialStore):
    """Reads the secret from an environment variable.

    Parameters
    ----------
    env_var : str
        Name of the variable holding the secret.
    dotenv_path : str, optional
        Explicit ``.env`` file.  When omitted python-dotenv searches
        from the working directory upwards.
    """

    def __init__(self, env_var: str = REQUIRED_KEYS["openai"], dotenv_path: Optional[str] = None) -> None:
        super().__init__()
        self.env_var = env_var
        if not load_dotenv(dotenv_path):
            logger.debug("[EnvCredentialStore] No .env file found or could not be loaded.")
        self._last = self.get()

    def get(self) -> Optional[str]:
        return os.getenv(self.env_var) or None

    def refresh(self) -> Optional[str]:
        """Re-read the environment, notifying listeners on a change."""
        current = self.get()
        if current != self._last:
            self._last = current
            self._notify(current)
        return current


__all__ = [
    "REQUIRED_KEYS",
    "has_api_key",
    "CredentialStore",
    "InMemoryCredentialStore",
    "EnvCredentialStore",
]
