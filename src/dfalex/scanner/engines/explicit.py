"""Explicit engine mixin: longest match over per-state branching."""

from __future__ import annotations

from dfalex.automaton.explicit import EXPLICIT_AUTOMATON
from dfalex.automaton.states import State
from dfalex.automaton.symbols import SymbolClass
from dfalex.errors import NoTokenError
from dfalex.tokens import TokenKind


class ExplicitEngineMixin:
    """Mixin providing the explicit scanning loop.

    Each iteration is one transition of the machine. The transition is
    the case analysis in ``ExplicitAutomaton.step``; accepting states
    are remembered so the scan can keep trying for a longer match.

    """

    _pos: int

    def _at_sentinel(self) -> bool:
        """Check if the cursor is on the end sentinel. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Scanner."""
        raise NotImplementedError

    def _pushback(self) -> None:
        """Return the last consumed character. Implemented by Scanner."""
        raise NotImplementedError

    def _classify(self, char: str, state: int, position: int) -> SymbolClass:
        """Classify with scan context for errors. Implemented by Scanner."""
        raise NotImplementedError

    def _trace_step(self, state: int, char: str, position: int, next_state: int) -> None:
        """Log one transition. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_explicit(self) -> TokenKind:
        """Scan one token using the explicit automaton.

        Returns:
            Kind of the longest token starting at the cursor, or EOF.

        Raises:
            IllegalCharacterError: A character outside the alphabet was read.
            NoTokenError: DEAD was reached before any accepting state.
        """
        automaton = EXPLICIT_AUTOMATON
        state = State.START
        last_accepting: TokenKind | None = None

        # End of the whole stream, distinct from end of input mid-token
        if self._at_sentinel():
            return TokenKind.EOF

        while True:
            position = self._pos
            char = self._advance()
            symbol = self._classify(char, state, position)
            next_state = automaton.step(state, symbol)
            self._trace_step(state, char, position, next_state)

            if next_state == State.DEAD:
                # The longest match ended before this character
                self._pushback()
                if last_accepting is None:
                    raise NoTokenError(char, state=state, position=position)
                return last_accepting

            kind = automaton.accepts(next_state)
            if kind is not None:
                last_accepting = kind
            state = next_state
