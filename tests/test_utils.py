import pytest

from chatbox.errors import MalformedJson
from chatbox.utils.json_parse import get_value, pick
from chatbox.utils.signals import Signal
from chatbox.utils.validation import is_blank, validate_json


def test_get_value_and_pick():
    data = {"a": 1, "b": 2}
    assert get_value(data, "missing", default="x") == "x"
    assert get_value("not a dict", "a") is None
    assert pick(data, ["a", "c"]) == {"a": 1}
    assert pick(None, ["a"]) == {}


def test_validation_helpers():
    assert is_blank("  \n")
    assert not is_blank(" x ")
    assert validate_json('{"ok": true}') == {"ok": True}
    with pytest.raises(MalformedJson):
        validate_json("{bad json}")


def test_signal_connect_emit_unsubscribe():
    signal = Signal("test")
    seen = []
    unsubscribe = signal.connect(seen.append)
    signal.emit(1)
    unsubscribe()
    unsubscribe()
    signal.emit(2)
    assert seen == [1]
    assert len(signal) == 0


def test_signal_survives_failing_listener():
    signal = Signal("test")
    seen = []

    def broken(_):
        raise RuntimeError("listener bug")

    signal.connect(broken)
    signal.connect(seen.append)
    signal.emit("x")
    assert seen == ["x"]

