"""Byte-level recognizer for PIN tokens.

Grammar: [+-]? [A-Za-z] ^?   (1-3 bytes, nothing else)

Every byte is classified on its own into one of four kinds (letter,
modifier, terminal, invalid) from a precomputed 256-entry table, then the
token is matched by length. No regular expression and no Unicode decoding
is involved: a multi-byte UTF-8 character is rejected because at least one
of its bytes lands in the invalid kind.

When a token is malformed the first position that breaks the grammar picks
the reported error:
  - a letter was seen but what follows it is wrong -> INVALID_TERMINAL_MARKER
  - a modifier was seen but no letter follows      -> MUST_CONTAIN_ONE_LETTER
  - the first byte is neither letter nor modifier  -> INVALID_STATE_MODIFIER
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from .constants import MAX_LENGTH, Side, State
from .errors import ErrorKind, ParseError

T = TypeVar("T")
U = TypeVar("U")


class ByteKind(Enum):
    LETTER = "letter"
    MODIFIER = "modifier"
    TERMINAL = "terminal"
    INVALID = "invalid"


@dataclass(frozen=True)
class ByteClass:
    value: int
    hex: str
    kind: ByteKind
    type: str | None = None
    side: Side | None = None
    state: State | None = None


@dataclass(frozen=True)
class Components:
    type: str
    side: Side
    state: State = State.NORMAL
    terminal: bool = False


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parse: exactly one of value / error is set."""

    value: T | None = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the parsed value, raising ParseError on failure."""
        if self.error is not None:
            raise ParseError(self.error)
        return self.value

    def map(self, fn: Callable[[T], U]) -> "ParseResult[U]":
        if self.error is not None:
            return ParseResult(error=self.error)
        return ParseResult(value=fn(self.value))


def classify_byte(value: int) -> ByteClass:
    """Classify a single byte value."""
    h = f"0x{value:02X}"

    if 0x41 <= value <= 0x5A:
        return ByteClass(value, h, ByteKind.LETTER, type=chr(value), side=Side.FIRST)
    if 0x61 <= value <= 0x7A:
        return ByteClass(value, h, ByteKind.LETTER,
                         type=chr(value - 0x20), side=Side.SECOND)
    if value == 0x2B:
        return ByteClass(value, h, ByteKind.MODIFIER, state=State.ENHANCED)
    if value == 0x2D:
        return ByteClass(value, h, ByteKind.MODIFIER, state=State.DIMINISHED)
    if value == 0x5E:
        return ByteClass(value, h, ByteKind.TERMINAL)

    return ByteClass(value, h, ByteKind.INVALID)


# Build the complete table
BYTE_TABLE = [classify_byte(v) for v in range(256)]


def _to_bytes(data):
    """Raw bytes of data, or None when data is not a byte/character sequence."""
    if isinstance(data, str):
        # Lone surrogates still have to reach the classifier as bytes
        return data.encode("utf-8", "surrogatepass")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return None


def _parse_one(a):
    if a.kind is ByteKind.LETTER:
        return Components(a.type, a.side)
    return ErrorKind.MUST_CONTAIN_ONE_LETTER


def _parse_two(a, b):
    if a.kind is ByteKind.MODIFIER:
        if b.kind is ByteKind.LETTER:
            return Components(b.type, b.side, a.state)
        return ErrorKind.MUST_CONTAIN_ONE_LETTER

    if a.kind is ByteKind.LETTER:
        if b.kind is ByteKind.TERMINAL:
            return Components(a.type, a.side, State.NORMAL, True)
        return ErrorKind.INVALID_TERMINAL_MARKER

    # Invalid byte or terminal marker in first position
    return ErrorKind.INVALID_STATE_MODIFIER


def _parse_three(a, b, c):
    if a.kind is ByteKind.MODIFIER:
        if b.kind is not ByteKind.LETTER:
            return ErrorKind.MUST_CONTAIN_ONE_LETTER
        if c.kind is not ByteKind.TERMINAL:
            return ErrorKind.INVALID_TERMINAL_MARKER
        return Components(b.type, b.side, a.state, True)

    # A bare letter can never be followed by two more bytes
    if a.kind is ByteKind.LETTER:
        return ErrorKind.INVALID_TERMINAL_MARKER

    return ErrorKind.INVALID_STATE_MODIFIER


_BY_LENGTH = {1: _parse_one, 2: _parse_two, 3: _parse_three}


def parse(data) -> ParseResult[Components]:
    """Parse a PIN token into its components.

    Accepts str (inspected as its UTF-8 bytes) or any bytes-like object.
    Never raises; failures come back as ParseResult.error.
    """
    raw = _to_bytes(data)
    if raw is None:
        return ParseResult(error=ErrorKind.INVALID_INPUT_TYPE)
    if not raw:
        return ParseResult(error=ErrorKind.EMPTY_INPUT)
    if len(raw) > MAX_LENGTH:
        return ParseResult(error=ErrorKind.INPUT_TOO_LONG)

    outcome = _BY_LENGTH[len(raw)](*(BYTE_TABLE[b] for b in raw))
    if isinstance(outcome, ErrorKind):
        return ParseResult(error=outcome)
    return ParseResult(value=outcome)


def is_valid(data) -> bool:
    """True if data is a well-formed PIN token."""
    return parse(data).ok
