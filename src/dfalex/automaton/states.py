"""Automaton states and the accepting-state-to-token map.

The DFA was produced upstream by subset construction over the NFAs for
``int``, ``[a-z]+`` and ``" "+``. Its states are fixed:

    START --i--> I --n--> IN --t--> INT
    START --other letter--> IDENT
    START --space--> SPACE --space--> SPACE
    I, IN, INT --letter--> IDENT (unless continuing toward ``int``)
    IDENT --letter--> IDENT

Every transition not listed goes to DEAD, which never leaves itself.

"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

from dfalex.tokens import TokenKind


class State(IntEnum):
    """DFA states; the value is the row index of the transition table."""

    START = 0
    IDENT = 1  # accepting: IDENTIFIER
    I = 2  # accepting: IDENTIFIER, one letter toward "int"
    IN = 3  # accepting: IDENTIFIER, two letters toward "int"
    INT = 4  # accepting: INT_KEYWORD
    SPACE = 5  # accepting: WHITESPACE
    DEAD = 6


START_STATE = State.START
DEAD_STATE = State.DEAD

# Reference accepting map. ExplicitAutomaton.accepts and TableAutomaton.accepts
# each encode it as their own if chain; the test suite checks both against it.
ACCEPTING: MappingProxyType[State, TokenKind] = MappingProxyType(
    {
        State.IDENT: TokenKind.IDENTIFIER,
        State.I: TokenKind.IDENTIFIER,
        State.IN: TokenKind.IDENTIFIER,
        State.INT: TokenKind.INT_KEYWORD,
        State.SPACE: TokenKind.WHITESPACE,
    }
)

NUM_STATES = len(State)


def state_name(state: int) -> str:
    """Return the state's name, or its number if it is not a State."""
    try:
        return State(state).name
    except ValueError:
        return str(state)


__all__ = ["ACCEPTING", "DEAD_STATE", "NUM_STATES", "START_STATE", "State", "state_name"]
