"""Fixed DFA description for the dfalex scanner.

The automaton recognizes three token kinds:

    INT_KEYWORD  int
    IDENTIFIER   [a-z]+
    WHITESPACE   " "+

Two materializations of the same transition function are provided:

automaton/
├── states.py     # State enum, accepting-state-to-token map
├── symbols.py    # SymbolClass enum, classify(), sentinel constants
├── explicit.py   # ExplicitAutomaton (per-state branching)
└── table.py      # TableAutomaton (dense transition table + validation)

Both agree on every (state, symbol class) pair.
"""

from dfalex.automaton.explicit import EXPLICIT_AUTOMATON, ExplicitAutomaton
from dfalex.automaton.states import ACCEPTING, DEAD_STATE, START_STATE, State
from dfalex.automaton.symbols import (
    ALPHABET,
    END_MARKER,
    SENTINEL,
    SymbolClass,
    classify,
)
from dfalex.automaton.table import TABLE_AUTOMATON, TRANSITION_TABLE, TableAutomaton

__all__ = [
    "ACCEPTING",
    "ALPHABET",
    "DEAD_STATE",
    "END_MARKER",
    "EXPLICIT_AUTOMATON",
    "ExplicitAutomaton",
    "SENTINEL",
    "START_STATE",
    "State",
    "SymbolClass",
    "TABLE_AUTOMATON",
    "TRANSITION_TABLE",
    "TableAutomaton",
    "classify",
]
