"""Token and TokenKind definitions for the dfalex scanner.

The scanner reports one TokenKind per call to ``next_token()``.
Token is the richer record produced by ``Scanner.tokenize()``: the kind
plus the matched lexeme and its offsets in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token kinds reported by the scanner.

    ERROR is the soft lexical-error kind of the table design. It is only
    produced when the table leads into a defined state that is neither
    accepting nor dead, which the shipped automaton never does.

    """

    EOF = auto()
    WHITESPACE = auto()  # " "+
    IDENTIFIER = auto()  # [a-z]+
    INT_KEYWORD = auto()  # int
    ERROR = auto()

    @property
    def label(self) -> str:
        """Short label used by the command-line driver."""
        return _LABELS[self]


_LABELS: dict[TokenKind, str] = {
    TokenKind.EOF: "EOF",
    TokenKind.WHITESPACE: "WS",
    TokenKind.IDENTIFIER: "ID",
    TokenKind.INT_KEYWORD: "INT",
    TokenKind.ERROR: "ERROR",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by ``Scanner.tokenize()``.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: The matched lexeme ("" for EOF)
        start: Absolute start offset in source (inclusive)
        end: Absolute end offset in source (exclusive)

    """

    kind: TokenKind
    value: str
    start: int
    end: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"
