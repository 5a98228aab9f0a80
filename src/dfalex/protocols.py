"""Protocols for dfalex.

Defines the contract shared by the explicit and table-driven automata.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dfalex.automaton.states import State
    from dfalex.automaton.symbols import SymbolClass
    from dfalex.tokens import TokenKind


@runtime_checkable
class Automaton(Protocol):
    """Protocol for a fixed DFA description.

    Implementations are pure lookups with no side effects, so a single
    instance can be shared by any number of scanners and threads.

    """

    def classify(self, char: str) -> SymbolClass:
        """Map a character to its symbol class.

        Raises:
            IllegalCharacterError: ``char`` is outside the alphabet.
        """
        ...

    def step(self, state: State, symbol: SymbolClass) -> State:
        """Return the unique next state for ``(state, symbol)``."""
        ...

    def accepts(self, state: State) -> TokenKind | None:
        """Return the token kind if ``state`` is accepting, else None."""
        ...
