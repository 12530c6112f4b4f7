"""PIN (Piece Identifier Notation).

A 1-3 character ASCII token describing a game piece: type, side, state and
terminal status.

    >>> import pin
    >>> pin.parse_or_raise("+r^")
    <Identifier '+r^'>
    >>> pin.parse("").error
    <ErrorKind.EMPTY_INPUT: 'empty_input'>

Usage:

    from pin import Identifier, Side, State, parse, parse_or_raise, is_valid
"""

from .core.constants import Side, State
from .core.errors import (
    ErrorKind,
    IdentifierError,
    InvalidSideError,
    InvalidStateError,
    InvalidTerminalError,
    InvalidTypeError,
    ParseError,
    PinError,
)
from .core.identifier import Identifier
from .core.parser import ParseResult
from .core.parser import is_valid as _is_valid
from .core.parser import parse as _parse

__version__ = "1.1.0"

__all__ = [
    "ErrorKind",
    "Identifier",
    "IdentifierError",
    "InvalidSideError",
    "InvalidStateError",
    "InvalidTerminalError",
    "InvalidTypeError",
    "ParseError",
    "ParseResult",
    "PinError",
    "Side",
    "State",
    "is_valid",
    "new",
    "parse",
    "parse_or_raise",
    "to_string",
]


def parse(text) -> ParseResult[Identifier]:
    """Parse a token into an Identifier without raising.

    Returns a ParseResult whose .value is the Identifier, or whose .error is
    the ErrorKind of the first grammar violation.
    """
    return _parse(text).map(Identifier.from_components)


def parse_or_raise(text) -> Identifier:
    """Parse a token into an Identifier, raising ParseError on failure."""
    return parse(text).unwrap()


def is_valid(text) -> bool:
    return _is_valid(text)


def to_string(identifier: Identifier) -> str:
    return identifier.to_string()


def new(type, side, state=State.NORMAL, terminal=False) -> Identifier:
    """Build a validated Identifier; see Identifier for the raised errors."""
    return Identifier(type, side, state, terminal)
