"""Static tables for PIN (Piece Identifier Notation).

Piece types are the 26 upper-case Latin letters. The letter case seen on the
wire is never part of the type: it carries the side instead
(upper = first, lower = second). States and the terminal flag are carried by
the optional prefix and suffix markers.
"""

from enum import Enum


# Canonical piece types, ASCII order
PIECE_TYPES = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Side(Enum):
    FIRST = "first"
    SECOND = "second"


class State(Enum):
    NORMAL = "normal"
    ENHANCED = "enhanced"
    DIMINISHED = "diminished"


SIDES = tuple(Side)
STATES = tuple(State)

# Longest valid token: prefix + letter + suffix
MAX_LENGTH = 3

# Formatting symbols
ENHANCED_PREFIX = "+"
DIMINISHED_PREFIX = "-"
EMPTY = ""
TERMINAL_SUFFIX = "^"

STATE_PREFIXES = {
    State.NORMAL: EMPTY,
    State.ENHANCED: ENHANCED_PREFIX,
    State.DIMINISHED: DIMINISHED_PREFIX,
}


def is_valid_type(value) -> bool:
    """True if value is one of the 26 canonical piece types."""
    return isinstance(value, str) and len(value) == 1 and value in PIECE_TYPES


def is_valid_side(value) -> bool:
    return isinstance(value, Side)


def is_valid_state(value) -> bool:
    return isinstance(value, State)
