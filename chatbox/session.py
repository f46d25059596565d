"""Session controller.

The :class:`SessionController` is the one stateful coordinator of a
chat session.  For every user turn it reads the credential, extracts
the page context, builds the system prompt, asks the completion
client for a reply, parses it and appends the resulting entries to
the :class:`chatbox.context.ConversationStore` it owns.

Only one turn may be in flight.  A turn moves the controller from
``IDLE`` to ``AWAITING_REPLY`` and always ends back in ``IDLE``; every
failure is absorbed here and reported through a :class:`TurnOutcome`
and the controller's signals, never raised to the caller.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Optional, Tuple

from .completion import CompletionClient
from .context import AssistantPayload, ChatEntry, ConversationStore
from .credentials import CredentialStore
from .errors import CredentialMissing, EmptyCompletion, ParseError, ProviderError
from .extractors.base import ContextExtractor
from .prompt_builder import PromptBuilder
from .response_parser import ResponseParser
from .utils.signals import Signal, Unsubscribe
from .utils.validation import is_blank

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class TurnOutcome(str, Enum):
    """How a call to :meth:`SessionController.submit` ended."""
    IGNORED = "ignored"                    # blank text, nothing happened
    BUSY = "busy"                          # another turn was in flight
    CREDENTIAL_MISSING = "credential_missing"
    PROVIDER_ERROR = "provider_error"
    NO_REPLY = "no_reply"                  # provider answered with no content
    DROPPED = "dropped"                    # reply failed the structural contract
    REPLIED = "replied"
    FAILED = "failed"                      # a collaborator raised something unexpected


class SessionController:
    """Coordinate the turns of one chat session.

    Parameters
    ----------
    extractor : ContextExtractor
        Reads the host page at each turn.
    credentials : CredentialStore
        Supplies the provider secret.  The controller subscribes to its
        change channel once and unsubscribes in :meth:`close`.
    completion : CompletionClient, optional
        Provider exchange; defaults to an OpenAI-backed client.
    prompt_builder : PromptBuilder, optional
        Defaults to the packaged system prompt template.
    parser : ResponseParser, optional
    store : ConversationStore, optional
        Starts empty when omitted.
    """

    def __init__(
        self,
        extractor: ContextExtractor,
        credentials: CredentialStore,
        completion: Optional[CompletionClient] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        parser: Optional[ResponseParser] = None,
        store: Optional[ConversationStore] = None,
    ) -> None:
        self.extractor = extractor
        self.credentials = credentials
        self.completion = completion or CompletionClient()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.parser = parser or ResponseParser()
        self._store = store or ConversationStore()

        self.on_state_change = Signal("state_change")
        self.on_entry_appended = Signal("entry_appended")
        self.on_credential_required = Signal("credential_required")
        self.on_error = Signal("error")

        self._state = SessionState.IDLE
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self.draft: str = ""
        self.visible: bool = False

        self.credential_available: bool = bool(credentials.get())
        self._unsubscribe_credentials: Optional[Unsubscribe] = credentials.on_change(self._credential_changed)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is SessionState.AWAITING_REPLY

    def snapshot(self) -> Tuple[ChatEntry, ...]:
        """Return the conversation so far, oldest entry first."""
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_draft(self, text: str) -> None:
        """Update the input buffer that :meth:`submit` sends by default."""
        self.draft = text

    def toggle_visible(self) -> bool:
        """Show or hide the chat panel.

        Without a credential the panel stays hidden and the
        credential-required signal fires instead.
        """
        self.credential_available = bool(self.credentials.get())
        if not self.credential_available:
            self.on_credential_required.emit(CredentialMissing())
            return self.visible
        self.visible = not self.visible
        return self.visible

    def submit(self, text: Optional[str] = None) -> TurnOutcome:
        """Run a full turn for *text* (or the current draft) and wait for it."""
        started = self._begin_turn(self.draft if text is None else text)
        if isinstance(started, TurnOutcome):
            return started
        return self._complete_turn(*started)

    def submit_in_background(self, text: Optional[str] = None) -> "Future[TurnOutcome]":
        """Start a turn and run the provider exchange on a worker thread.

        The user entry is appended before this method returns.  The
        returned future resolves to the turn's outcome.
        """
        started = self._begin_turn(self.draft if text is None else text)
        if isinstance(started, TurnOutcome):
            future: "Future[TurnOutcome]" = Future()
            future.set_result(started)
            return future
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="chatbox-turn")
        return self._executor.submit(self._complete_turn, *started)

    def close(self) -> None:
        """Tear the session down: drop the credential subscription and worker."""
        if self._unsubscribe_credentials is not None:
            self._unsubscribe_credentials()
            self._unsubscribe_credentials = None
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        for signal in (self.on_state_change, self.on_entry_appended, self.on_credential_required, self.on_error):
            signal.clear()

    # ------------------------------------------------------------------
    # Turn processing
    # ------------------------------------------------------------------

    def _begin_turn(self, text: str):
        """Validate the submission and record the user entry.

        Returns a :class:`TurnOutcome` when the turn ends right away,
        otherwise the ``(text, credential, history)`` needed to finish it.

        The credential is read before the user entry is recorded, so a
        turn without one leaves the conversation untouched and never
        enters ``AWAITING_REPLY``; state observers see no transition.
        """
        with self._lock:
            if self._state is not SessionState.IDLE:
                logger.warning("[SessionController] submit ignored, a turn is already in flight")
                return TurnOutcome.BUSY
            if is_blank(text):
                return TurnOutcome.IGNORED

            credential = self.credentials.get()
            if not credential:
                logger.info("[SessionController] no API key available, turn aborted")
                self.on_credential_required.emit(CredentialMissing())
                return TurnOutcome.CREDENTIAL_MISSING

            # History excludes the entry of the turn being started
            history = self._store.snapshot()
            self._set_state(SessionState.AWAITING_REPLY)
            self._append(ChatEntry.user(text))
            self.draft = ""
        return text, credential, history

    def _complete_turn(self, text: str, credential: str, history: Tuple[ChatEntry, ...]) -> TurnOutcome:
        try:
            context = self.extractor.extract()
            system_prompt = self.prompt_builder.build(context)
            raw = self.completion.complete(system_prompt, history, text, context.user_code, credential)
            payload = self.parser.parse(raw)
        except ProviderError as exc:
            logger.error("[SessionController] provider call failed: %s", exc)
            self.on_error.emit(exc)
            return self._finish(TurnOutcome.PROVIDER_ERROR)
        except EmptyCompletion as exc:
            logger.info("[SessionController] %s", exc)
            return self._finish(TurnOutcome.NO_REPLY)
        except ParseError as exc:
            # Replies that do not match the contract are dropped without
            # telling the user.
            logger.debug("[SessionController] reply dropped: %s", exc)
            return self._finish(TurnOutcome.DROPPED)
        except Exception as exc:
            logger.exception("[SessionController] turn failed unexpectedly")
            self.on_error.emit(exc)
            return self._finish(TurnOutcome.FAILED)

        self._record_reply(payload)
        return self._finish(TurnOutcome.REPLIED)

    def _record_reply(self, payload: AssistantPayload) -> None:
        with self._lock:
            self._append(ChatEntry.assistant(payload))

    def _finish(self, outcome: TurnOutcome) -> TurnOutcome:
        with self._lock:
            self._set_state(SessionState.IDLE)
        logger.debug("[SessionController] turn finished: %s", outcome.value)
        return outcome

    def _append(self, entry: ChatEntry) -> None:
        self._store.append(entry)
        self.on_entry_appended.emit(entry)

    def _set_state(self, state: SessionState) -> None:
        if state is self._state:
            return
        self._state = state
        self.on_state_change.emit(state)

    def _credential_changed(self, value: Optional[str]) -> None:
        self.credential_available = bool(value)


__all__ = ["SessionController", "SessionState", "TurnOutcome"]
