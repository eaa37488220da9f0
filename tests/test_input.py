import pytest

from actionkit.env import EnvMap
from actionkit.input import (
    BoolParseError,
    Input,
    IntParseError,
    ParseError,
    env_var_name,
    get_input,
    get_multiline,
    parse_bool,
    parse_input,
    parse_int,
    set_input,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("some-input", "INPUT_SOME-INPUT"),
        ("INPUT_some-input", "INPUT_SOME-INPUT"),
        ("INPUT_SOME-INPUT", "INPUT_SOME-INPUT"),
        ("test-INPUT_SOME-INPUT", "INPUT_TEST-INPUT_SOME-INPUT"),
    ],
)
def test_env_name(name, expected):
    assert env_var_name(name) == expected


def test_env_name_only_ascii_uppercased():
    assert env_var_name("straße") == "INPUT_STRAßE"


def test_get_non_empty_input():
    env = EnvMap()
    set_input(env, "some-input", "SET")
    assert env.get("INPUT_SOME-INPUT") == "SET"
    assert get_input(env, "some-input") == "SET"


def test_get_empty_input():
    env = EnvMap()
    input_name = "some-input"
    assert parse_input(env, input_name, str) is None
    set_input(env, input_name, "")
    assert parse_input(env, input_name, str) is None
    set_input(env, input_name, " ")
    assert parse_input(env, input_name, str) == " "


@pytest.mark.parametrize("raw", ["yes", "true", "t", "TRUE", "Yes", "T"])
def test_parse_bool_true(raw):
    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["no", "false", "f", "FALSE", "No", "F"])
def test_parse_bool_false(raw):
    assert parse_bool(raw) is False


@pytest.mark.parametrize("raw", ["", "1", "0", "y", " true", "maybe"])
def test_parse_bool_invalid(raw):
    with pytest.raises(BoolParseError) as info:
        parse_bool(raw)
    assert info.value.value == raw
    assert isinstance(info.value, ParseError)


@pytest.mark.parametrize("raw, expected", [("0", 0), ("42", 42), ("+7", 7)])
def test_parse_int_valid(raw, expected):
    assert parse_int(raw) == expected


def test_parse_int_max():
    assert parse_int(str(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize(
    "raw", ["", "-1", "1_000", " 1", "1.5", "abc", "+", str(2**64)]
)
def test_parse_int_invalid(raw):
    with pytest.raises(IntParseError) as info:
        parse_int(raw)
    assert info.value.value == raw


def test_parse_input_with_kind():
    env = EnvMap()
    set_input(env, "flag", "true")
    set_input(env, "count", "12")
    assert parse_input(env, "flag", parse_bool) is True
    assert parse_input(env, "count", parse_int) == 12


def test_parse_input_propagates_error():
    env = EnvMap()
    set_input(env, "flag", "nope")
    with pytest.raises(BoolParseError):
        parse_input(env, "flag", parse_bool)


def test_parse_input_default_kind_is_str():
    env = EnvMap()
    set_input(env, "name", "value")
    assert parse_input(env, "name") == "value"


def test_get_multiline():
    env = EnvMap()
    set_input(env, "files", "a\r\nb\n\nc\n")
    assert get_multiline(env, "files") == ["a", "b", "", "c"]


def test_get_multiline_missing():
    assert get_multiline(EnvMap(), "files") is None


def test_input_defaults():
    meta = Input()
    assert (meta.description, meta.deprecation_message, meta.default, meta.required) == (
        None,
        None,
        None,
        None,
    )