"""
Observer helpers.

Components that need to tell the outside world about something (a
credential change, a new chat entry, a state transition) expose a
:class:`Signal`.  Listeners subscribe with :meth:`Signal.connect`,
which hands back a zero-argument callable that removes the listener
again.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


class Signal:
    """An ordered list of listeners called with the same arguments.

    A listener that raises is logged and skipped; the remaining
    listeners still run and the emitter is not interrupted.
    """

    def __init__(self, name: str = "signal") -> None:
        self.name = name
        self._listeners: List[Callable[..., Any]] = []

    def connect(self, listener: Callable[..., Any]) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, *args: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception:
                logger.exception("[Signal] listener of %r failed", self.name)

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = ["Signal", "Unsubscribe"]
