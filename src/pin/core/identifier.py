"""Immutable PIN identifier.

An Identifier holds the four attributes of a piece and renders back to
exactly one wire token:

    prefix + letter + suffix

    prefix  "+" enhanced, "-" diminished, "" normal
    letter  type, upper case for the first side, lower case for the second
    suffix  "^" terminal, "" otherwise

Transformations never mutate; when the requested value already holds the
same instance is returned.
"""

from dataclasses import dataclass, replace

from .constants import (
    EMPTY,
    PIECE_TYPES,
    STATE_PREFIXES,
    TERMINAL_SUFFIX,
    Side,
    State,
    is_valid_type,
)
from .errors import (
    InvalidSideError,
    InvalidStateError,
    InvalidTerminalError,
    InvalidTypeError,
)
from .parser import Components, is_valid as _is_valid, parse as _parse


def _coerce_side(value) -> Side:
    try:
        return Side(value)
    except (ValueError, TypeError):
        raise InvalidSideError(
            f"Side must be Side.FIRST or Side.SECOND, got {value!r}") from None


def _coerce_state(value) -> State:
    try:
        return State(value)
    except (ValueError, TypeError):
        raise InvalidStateError(
            f"State must be NORMAL, ENHANCED or DIMINISHED, got {value!r}") from None


@dataclass(frozen=True, repr=False)
class Identifier:
    type: str
    side: Side
    state: State = State.NORMAL
    terminal: bool = False

    def __post_init__(self):
        if not is_valid_type(self.type):
            raise InvalidTypeError(
                f"Type must be one letter {PIECE_TYPES[0]}-{PIECE_TYPES[-1]}, "
                f"got {self.type!r}")
        object.__setattr__(self, "side", _coerce_side(self.side))
        object.__setattr__(self, "state", _coerce_state(self.state))
        if not isinstance(self.terminal, bool):
            raise InvalidTerminalError(
                f"Terminal must be a bool, got {self.terminal!r}")

    # ---- Parsing ----

    @classmethod
    def from_components(cls, components: Components) -> "Identifier":
        return cls(components.type, components.side,
                   components.state, components.terminal)

    @classmethod
    def parse(cls, text) -> "Identifier":
        """Parse a token, raising ParseError if it is malformed."""
        return cls.from_components(_parse(text).unwrap())

    @staticmethod
    def is_valid(text) -> bool:
        return _is_valid(text)

    # ---- Serialization ----

    def letter(self) -> str:
        return self.type if self.side is Side.FIRST else self.type.lower()

    def prefix(self) -> str:
        return STATE_PREFIXES[self.state]

    def suffix(self) -> str:
        return TERMINAL_SUFFIX if self.terminal else EMPTY

    def to_string(self) -> str:
        return self.prefix() + self.letter() + self.suffix()

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"<Identifier {self.to_string()!r}>"

    # ---- State transformations ----

    def enhance(self) -> "Identifier":
        return self.with_state(State.ENHANCED)

    def diminish(self) -> "Identifier":
        return self.with_state(State.DIMINISHED)

    def normalize(self) -> "Identifier":
        return self.with_state(State.NORMAL)

    # ---- Side transformations ----

    def flip(self) -> "Identifier":
        """Same piece, owned by the other side."""
        other = Side.SECOND if self.side is Side.FIRST else Side.FIRST
        return replace(self, side=other)

    # ---- Terminal transformations ----

    def mark_terminal(self) -> "Identifier":
        return self.with_terminal(True)

    def unmark_terminal(self) -> "Identifier":
        return self.with_terminal(False)

    # ---- Attribute transformations ----
    # Each re-validates its argument the same way the constructor does.

    def with_type(self, new_type) -> "Identifier":
        if new_type == self.type:
            return self
        return replace(self, type=new_type)

    def with_side(self, new_side) -> "Identifier":
        new_side = _coerce_side(new_side)
        if new_side is self.side:
            return self
        return replace(self, side=new_side)

    def with_state(self, new_state) -> "Identifier":
        new_state = _coerce_state(new_state)
        if new_state is self.state:
            return self
        return replace(self, state=new_state)

    def with_terminal(self, new_terminal) -> "Identifier":
        if new_terminal is self.terminal:
            return self
        return replace(self, terminal=new_terminal)

    # ---- Queries ----

    def is_normal(self) -> bool:
        return self.state is State.NORMAL

    def is_enhanced(self) -> bool:
        return self.state is State.ENHANCED

    def is_diminished(self) -> bool:
        return self.state is State.DIMINISHED

    def is_first_player(self) -> bool:
        return self.side is Side.FIRST

    def is_second_player(self) -> bool:
        return self.side is Side.SECOND

    def is_terminal(self) -> bool:
        return self.terminal

    # ---- Comparison ----

    def same_type(self, other: "Identifier") -> bool:
        return self.type == other.type

    def same_side(self, other: "Identifier") -> bool:
        return self.side is other.side

    def same_state(self, other: "Identifier") -> bool:
        return self.state is other.state

    def same_terminal(self, other: "Identifier") -> bool:
        return self.terminal == other.terminal
