import pytest

from chatbox.errors import MalformedJson, MissingOutputField, ParseError
from chatbox.response_parser import ResponseParser, parse_response


def test_feedback_only():
    payload = parse_response('{"output":{"feedback":"f"}}')
    assert payload.feedback == "f"
    assert payload.hints is None
    assert payload.snippet is None
    assert payload.programming_language is None


def test_all_fields():
    payload = parse_response(
        '{"output":{"feedback":"Looks good","hints":["try X"],"snippet":"def f(): return 1",'
        '"programmingLanguage":"python"}}'
    )
    assert payload.feedback == "Looks good"
    assert payload.hints == ("try X",)
    assert payload.snippet == "def f(): return 1"
    assert payload.programming_language == "python"


def test_missing_output():
    with pytest.raises(MissingOutputField):
        parse_response("{}")


def test_not_json():
    with pytest.raises(MalformedJson):
        parse_response("not-json")


def test_top_level_array_has_no_output():
    with pytest.raises(MissingOutputField):
        parse_response("[1, 2]")


def test_empty_output_is_valid():
    payload = ResponseParser().parse('{"output":{}}')
    assert payload.is_empty()


def test_non_object_output_carries_no_fields():
    assert parse_response('{"output":"text"}').is_empty()


def test_types_are_trusted():
    payload = parse_response('{"output":{"hints":"single hint","extra":1}}')
    assert payload.hints == "single hint"


def test_parse_errors_are_value_errors():
    assert issubclass(ParseError, ValueError)


def test_arrays_become_tuples():
    payload = parse_response('{"output":{"hints":["a", ["b"]]}}')
    assert payload.hints == ("a", ("b",))
