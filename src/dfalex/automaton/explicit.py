"""Explicit automaton: the transition function as per-state branching.

Each state has its own block; inside it an if/elif chain over the
symbol class picks the target. Any pair without a branch goes to DEAD.
"""

from __future__ import annotations

from dfalex.automaton.states import State
from dfalex.automaton.symbols import SymbolClass, classify
from dfalex.tokens import TokenKind


class ExplicitAutomaton:
    """DFA description written as direct case analysis.

    Stateless; use the module-level ``EXPLICIT_AUTOMATON`` instance.

    """

    __slots__ = ()

    def classify(self, char: str) -> SymbolClass:
        return classify(char)

    def step(self, state: State, symbol: SymbolClass) -> State:
        """Return the next state for ``(state, symbol)``.

        Args:
            state: Current state
            symbol: Classified input symbol

        Returns:
            Target state; DEAD for every pair without a transition.
        """
        if state == State.START:
            if symbol == SymbolClass.SPACE:
                return State.SPACE
            elif symbol == SymbolClass.LETTER_I:
                return State.I
            elif symbol != SymbolClass.END:
                return State.IDENT

        elif state == State.I:
            if symbol == SymbolClass.LETTER_N:
                return State.IN
            elif symbol not in (SymbolClass.END, SymbolClass.SPACE):
                return State.IDENT

        elif state == State.IN:
            if symbol == SymbolClass.LETTER_T:
                return State.INT
            elif symbol not in (SymbolClass.END, SymbolClass.SPACE):
                return State.IDENT

        elif state == State.IDENT or state == State.INT:
            # More letters after "int" fall back to a plain identifier
            if symbol not in (SymbolClass.END, SymbolClass.SPACE):
                return State.IDENT

        elif state == State.SPACE:
            if symbol == SymbolClass.SPACE:
                return State.SPACE

        return State.DEAD

    def accepts(self, state: State) -> TokenKind | None:
        if state == State.IDENT or state == State.I or state == State.IN:
            return TokenKind.IDENTIFIER
        elif state == State.INT:
            return TokenKind.INT_KEYWORD
        elif state == State.SPACE:
            return TokenKind.WHITESPACE
        return None


EXPLICIT_AUTOMATON = ExplicitAutomaton()
