"""Exception classes for dfalex.

Provides standardized exceptions for error handling throughout dfalex.
Lexical errors carry the (state, character, position) triple so callers
can decide whether to abort or resynchronize.
"""

from __future__ import annotations


class DfalexError(Exception):
    """Base exception for all dfalex errors.

    Subclass this for specific error categories.
    """

    pass


class LexicalError(DfalexError):
    """Error while scanning a token.

    Raised when the input at the current position cannot continue
    or complete a token.
    """

    description = "lexical error"

    def __init__(
        self,
        char: str,
        state: int | None = None,
        position: int | None = None,
    ) -> None:
        """Initialize lexical error with optional scan context.

        Args:
            char: The offending character
            state: Automaton state the scanner was in (optional)
            position: Offset of the character in the source (optional)
        """
        self.char = char
        self.state = state
        self.position = position

        location = f"{position}: " if position is not None else ""
        context = ""
        if state is not None:
            # Import here to avoid circular import at module load
            from dfalex.automaton.states import state_name

            context = f" in state {state_name(state)}"
        super().__init__(f"{location}{self.description}{context} on char {char!r}")


class IllegalCharacterError(LexicalError):
    """Character outside the scanner's alphabet."""

    description = "illegal character"


class NoTokenError(LexicalError):
    """Dead state reached before any accepting state was visited."""

    description = "no token"


class TransitionTableError(DfalexError):
    """Malformed transition table or out-of-range state value.

    Raised by table validation and by the table engine when a lookup
    yields a state outside the automaton.
    """

    def __init__(self, message: str, state: int | None = None) -> None:
        self.state = state
        super().__init__(message)

