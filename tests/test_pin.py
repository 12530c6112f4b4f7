"""Tests for the pin package facade."""

import pytest

import pin
from pin import (
    ErrorKind,
    Identifier,
    InvalidSideError,
    ParseError,
    PinError,
    Side,
    State,
)


class TestParse:
    def test_returns_identifier(self):
        result = pin.parse("+r")
        assert result.ok
        assert result.value == Identifier("R", Side.SECOND, State.ENHANCED, False)

    @pytest.mark.parametrize("token, kind", [
        ("", ErrorKind.EMPTY_INPUT),
        ("KK", ErrorKind.INVALID_TERMINAL_MARKER),
        ("^K", ErrorKind.INVALID_STATE_MODIFIER),
        ("+1", ErrorKind.MUST_CONTAIN_ONE_LETTER),
        ("+K^X", ErrorKind.INPUT_TOO_LONG),
        (None, ErrorKind.INVALID_INPUT_TYPE),
    ])
    def test_error_kinds(self, token, kind):
        result = pin.parse(token)
        assert result.error is kind
        assert result.value is None


class TestParseOrRaise:
    def test_success(self):
        assert pin.parse_or_raise("-k^") == Identifier(
            "K", Side.SECOND, State.DIMINISHED, True)

    @pytest.mark.parametrize("token, message", [
        ("", "empty input"),
        ("KQR4", "input exceeds 3 characters"),
        ("+", "must contain exactly one letter"),
        ("!K", "invalid state modifier"),
        ("K!", "invalid terminal marker"),
        (42, "input must be a string"),
    ])
    def test_messages(self, token, message):
        with pytest.raises(ParseError, match=message):
            pin.parse_or_raise(token)

    def test_error_carries_kind(self):
        with pytest.raises(PinError) as excinfo:
            pin.parse_or_raise("^")
        assert excinfo.value.kind is ErrorKind.MUST_CONTAIN_ONE_LETTER


class TestIsValid:
    def test_examples(self):
        for token in ("K", "k", "+R", "-p", "K^", "+K^", "-k^"):
            assert pin.is_valid(token)

    def test_non_string(self):
        assert not pin.is_valid(None)
        assert not pin.is_valid(3)


class TestNewAndToString:
    def test_new(self):
        assert pin.to_string(pin.new("K", Side.FIRST)) == "K"
        assert pin.to_string(pin.new("R", Side.SECOND, State.ENHANCED)) == "+r"
        assert pin.to_string(pin.new("K", Side.FIRST, terminal=True)) == "K^"

    def test_new_validates(self):
        with pytest.raises(InvalidSideError):
            pin.new("K", "both")


class TestRoundTrip:
    def test_312_tokens(self, all_valid_tokens):
        assert len(all_valid_tokens) == 312
        assert len(set(all_valid_tokens)) == 312
        for token in all_valid_tokens:
            assert pin.to_string(pin.parse_or_raise(token)) == token

    def test_every_identifier_renders_to_a_valid_token(self):
        seen = set()
        for type_ in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
            for side in Side:
                for state in State:
                    for terminal in (False, True):
                        id_ = pin.new(type_, side, state, terminal)
                        token = pin.to_string(id_)
                        assert pin.parse_or_raise(token) == id_
                        seen.add(token)
        assert len(seen) == 312

    def test_bytes_round_trip(self):
        assert pin.to_string(pin.parse_or_raise(b"-q^")) == "-q^"


def test_version():
    assert pin.__version__ == "1.1.0"
