"""Table-driven engine mixin: longest match over a transition table."""

from __future__ import annotations

from dfalex.automaton.states import State
from dfalex.automaton.symbols import SymbolClass
from dfalex.automaton.table import TableAutomaton
from dfalex.errors import NoTokenError, TransitionTableError
from dfalex.tokens import TokenKind


class TableEngineMixin:
    """Mixin providing the table-driven scanning loop.

    Each iteration looks up ``table[state][symbol]`` and then switches
    on the resulting state:

    - DEAD: push the character back and report the last accepting kind
    - accepting: remember its kind and keep going
    - any other defined state: remember the soft ``TokenKind.ERROR``
    - anything else: the table is corrupt

    """

    _pos: int
    _table_automaton: TableAutomaton

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

    def _scan_table(self) -> TokenKind:
        """Scan one token using the transition table.

        Returns:
            Kind of the longest token starting at the cursor, or EOF.
            ``TokenKind.ERROR`` only for tables that fail validation.

        Raises:
            IllegalCharacterError: A character outside the alphabet was read.
            NoTokenError: DEAD was reached before any accepting state.
            TransitionTableError: The table has no entry for a lookup or
                produced an unknown state.
        """
        automaton = self._table_automaton
        table = automaton.table
        num_states = automaton.num_states
        state: int = State.START
        last_accepting: TokenKind | None = None

        if self._at_sentinel():
            return TokenKind.EOF

        while True:
            position = self._pos
            char = self._advance()
            symbol = self._classify(char, state, position)
            try:
                next_state = table[state][symbol]
            except IndexError:
                self._pushback()
                raise TransitionTableError(
                    f"no entry for state {state} on {char!r}", state=state
                ) from None
            self._trace_step(state, char, position, next_state)

            if next_state == State.DEAD:
                # We may have passed an accepting state without returning,
                # to keep going for the longest match. That state really was
                # the end, so report it and keep this character for later.
                self._pushback()
                if last_accepting is None:
                    raise NoTokenError(char, state=state, position=position)
                return last_accepting

            if not isinstance(next_state, int) or not 0 <= next_state < num_states:
                self._pushback()
                raise TransitionTableError(
                    f"bad state value {next_state} from state {state} on {char!r}",
                    state=next_state,
                )

            kind = automaton.accepts(next_state)
            if kind is not None:
                last_accepting = kind
            else:
                last_accepting = TokenKind.ERROR
            state = next_state
