import pytest

from chatbox.context import (
    AssistantPayload,
    ChatEntry,
    ConversationStore,
    DisplayKind,
    Role,
    SessionContext,
)


def test_user_entry_fields():
    entry = ChatEntry.user("help")
    assert entry.role is Role.USER
    assert entry.display_kind is DisplayKind.PLAIN_TEXT
    assert entry.raw_message == "help"
    assert entry.assistant_payload is None


def test_assistant_entry_uses_placeholder_message():
    payload = AssistantPayload(feedback="ok")
    entry = ChatEntry.assistant(payload)
    assert entry.role is Role.ASSISTANT
    assert entry.display_kind is DisplayKind.STRUCTURED_MARKDOWN
    assert entry.raw_message == "NA"
    assert entry.assistant_payload.feedback == "ok"


def test_entries_are_immutable():
    entry = ChatEntry.user("a")
    with pytest.raises(AttributeError):
        entry.raw_message = "b"  # type: ignore[misc]


def test_store_append_and_to_messages():
    store = ConversationStore()
    store.append(ChatEntry.user("Hi"))
    store.append(ChatEntry.assistant(AssistantPayload()))
    assert len(store) == 2
    assert store.to_messages() == [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "NA"},
    ]


def test_store_keeps_duplicates_in_order():
    store = ConversationStore()
    for text in ["a", "a", "b"]:
        store.append(ChatEntry.user(text))
    assert [entry.raw_message for entry in store] == ["a", "a", "b"]


def test_snapshot_is_stable_and_detached():
    store = ConversationStore()
    store.append(ChatEntry.user("x"))
    first = store.snapshot()
    second = store.snapshot()
    assert first == second
    store.append(ChatEntry.user("y"))
    assert len(first) == 1
    assert len(store.snapshot()) == 2


def test_store_rejects_non_entries():
    store = ConversationStore()
    with pytest.raises(TypeError):
        store.append({"role": "user", "content": "x"})  # type: ignore[arg-type]


def test_payload_alias_and_is_empty():
    payload = AssistantPayload(programmingLanguage="python")
    assert payload.programming_language == "python"
    assert not payload.is_empty()
    assert AssistantPayload().is_empty()


def test_session_context_defaults():
    ctx = SessionContext(problem_statement="p")
    assert ctx.programming_language == "UNKNOWN"
    assert ctx.user_code == ""
