"""Table-driven automaton: the transition function as a 2-D lookup.

Rows are states, columns are symbol classes, entries are target states.
Accepting-state reporting is an if chain on the resulting state.

Validation:
The table design can in principle land in a defined state that is
neither accepting nor dead; the scanner would then report the soft
``TokenKind.ERROR``. ``TableAutomaton.validate()`` rejects any table
where that is reachable, so the soft error never reaches callers.

"""

from __future__ import annotations

from collections.abc import Sequence

from dfalex.automaton.states import (
    DEAD_STATE,
    NUM_STATES,
    START_STATE,
    State,
)
from dfalex.automaton.symbols import NUM_SYMBOLS, SymbolClass, classify
from dfalex.errors import TransitionTableError
from dfalex.tokens import TokenKind
from dfalex.utils.logger import get_logger

logger = get_logger(__name__)

_S = State

# fmt: off
TRANSITION_TABLE: tuple[tuple[int, ...], ...] = (
    #          $        sp        i         n         t         *
    (_S.DEAD,  _S.SPACE, _S.I,     _S.IDENT, _S.IDENT, _S.IDENT),  # START
    (_S.DEAD,  _S.DEAD,  _S.IDENT, _S.IDENT, _S.IDENT, _S.IDENT),  # IDENT
    (_S.DEAD,  _S.DEAD,  _S.IDENT, _S.IN,    _S.IDENT, _S.IDENT),  # I
    (_S.DEAD,  _S.DEAD,  _S.IDENT, _S.IDENT, _S.INT,   _S.IDENT),  # IN
    (_S.DEAD,  _S.DEAD,  _S.IDENT, _S.IDENT, _S.IDENT, _S.IDENT),  # INT
    (_S.DEAD,  _S.SPACE, _S.DEAD,  _S.DEAD,  _S.DEAD,  _S.DEAD),   # SPACE
    (_S.DEAD,  _S.DEAD,  _S.DEAD,  _S.DEAD,  _S.DEAD,  _S.DEAD),   # DEAD
)
# fmt: on


class TableAutomaton:
    """DFA description backed by a dense transition table.

    Args:
        table: Rows indexed by state, columns by symbol class.
            Defaults to ``TRANSITION_TABLE``.

    """

    __slots__ = ("_table", "_num_states")

    def __init__(self, table: Sequence[Sequence[int]] = TRANSITION_TABLE) -> None:
        self._table = tuple(tuple(row) for row in table)
        self._num_states = len(self._table)

    @property
    def table(self) -> tuple[tuple[int, ...], ...]:
        return self._table

    @property
    def num_states(self) -> int:
        return self._num_states

    def classify(self, char: str) -> SymbolClass:
        return classify(char)

    def step(self, state: int, symbol: SymbolClass) -> int:
        return self._table[state][symbol]

    def accepts(self, state: int) -> TokenKind | None:
        if state == State.IDENT:
            return TokenKind.IDENTIFIER
        elif state == State.I:
            return TokenKind.IDENTIFIER
        elif state == State.IN:
            return TokenKind.IDENTIFIER
        elif state == State.INT:
            return TokenKind.INT_KEYWORD
        elif state == State.SPACE:
            return TokenKind.WHITESPACE
        return None

    def reachable_states(self) -> set[int]:
        """Return every state reachable from START (START included)."""
        seen = {int(START_STATE)}
        pending = [int(START_STATE)]
        while pending:
            state = pending.pop()
            for target in self._table[state]:
                if target not in seen:
                    seen.add(target)
                    pending.append(target)
        return seen

    def soft_error_states(self) -> set[int]:
        """Return reachable states that would report ``TokenKind.ERROR``.

        These are transition targets, other than DEAD, that are not
        accepting. START itself only counts if a transition leads back
        into it. Empty for a well-formed table.
        """
        return {
            target
            for state in self.reachable_states()
            for target in self._table[state]
            if target != DEAD_STATE and self.accepts(target) is None
        }

    def validate(self) -> None:
        """Check the table for completeness and soft-error reachability.

        Raises:
            TransitionTableError: The table has the wrong shape, refers to
                unknown states, lets DEAD escape, or can reach a soft-error
                state.
        """
        if self._num_states != NUM_STATES:
            raise TransitionTableError(
                f"expected {NUM_STATES} rows, found {self._num_states}"
            )

        for state, row in enumerate(self._table):
            if len(row) != NUM_SYMBOLS:
                raise TransitionTableError(
                    f"row {state} has {len(row)} entries, expected {NUM_SYMBOLS}",
                    state=state,
                )
            for target in row:
                if not isinstance(target, int) or not 0 <= target < self._num_states:
                    raise TransitionTableError(
                        f"row {state} targets unknown state {target}", state=state
                    )

        if any(target != DEAD_STATE for target in self._table[DEAD_STATE]):
            raise TransitionTableError(
                "dead state has an outgoing transition", state=int(DEAD_STATE)
            )

        soft = self.soft_error_states()
        if soft:
            raise TransitionTableError(
                f"non-accepting states reachable: {sorted(soft)}", state=min(soft)
            )

        logger.debug("Transition table validated: %d states", self._num_states)


TABLE_AUTOMATON = TableAutomaton()
