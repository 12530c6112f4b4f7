"""Error kinds and exceptions for PIN parsing and construction."""

from enum import Enum


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    INPUT_TOO_LONG = "input_too_long"
    MUST_CONTAIN_ONE_LETTER = "must_contain_one_letter"
    INVALID_STATE_MODIFIER = "invalid_state_modifier"
    INVALID_TERMINAL_MARKER = "invalid_terminal_marker"
    INVALID_INPUT_TYPE = "invalid_input_type"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.EMPTY_INPUT: "empty input",
    ErrorKind.INPUT_TOO_LONG: "input exceeds 3 characters",
    ErrorKind.MUST_CONTAIN_ONE_LETTER: "must contain exactly one letter",
    ErrorKind.INVALID_STATE_MODIFIER: "invalid state modifier",
    ErrorKind.INVALID_TERMINAL_MARKER: "invalid terminal marker",
    ErrorKind.INVALID_INPUT_TYPE: "input must be a string",
}


class PinError(ValueError):
    """Base error for this package."""


class ParseError(PinError):
    """Raised when a token does not match the PIN grammar."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class IdentifierError(PinError):
    """Raised when an Identifier field has an invalid value."""


class InvalidTypeError(IdentifierError):
    pass


class InvalidSideError(IdentifierError):
    pass


class InvalidStateError(IdentifierError):
    pass


class InvalidTerminalError(IdentifierError):
    pass
