"""Error-path and malformed input tests.

Lexical errors carry (state, character, position) and leave the scanner
on the offending character so the caller can abort or resynchronize.
"""

from __future__ import annotations

import pytest

from dfalex import (
    DfalexError,
    IllegalCharacterError,
    LexicalError,
    NoTokenError,
    Scanner,
    ScanConfig,
    ScanStrategy,
    State,
    SymbolClass,
    TableAutomaton,
    TokenKind,
    TransitionTableError,
)
from dfalex.automaton import TRANSITION_TABLE

UNVALIDATED = ScanConfig(validate_table=False)


def _patched(state: State, symbol: SymbolClass, target: int) -> TableAutomaton:
    rows = [list(row) for row in TRANSITION_TABLE]
    rows[state][symbol] = target
    return TableAutomaton(rows)


@pytest.fixture(params=[ScanStrategy.EXPLICIT, ScanStrategy.TABLE], ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> ScanStrategy:
    return request.param


# =========================================================================
# Error construction and formatting
# =========================================================================


class TestLexicalErrorFormatting:
    """Verify LexicalError produces well-formatted messages."""

    def test_char_only(self) -> None:
        err = IllegalCharacterError("X")
        assert str(err) == "illegal character on char 'X'"
        assert err.state is None
        assert err.position is None

    def test_with_state_and_position(self) -> None:
        err = IllegalCharacterError("C", state=State.IDENT, position=2)
        assert str(err) == "2: illegal character in state IDENT on char 'C'"

    def test_unknown_state_number(self) -> None:
        err = NoTokenError(" ", state=99, position=0)
        assert "in state 99" in str(err)

    def test_hierarchy(self) -> None:
        assert issubclass(IllegalCharacterError, LexicalError)
        assert issubclass(NoTokenError, LexicalError)
        assert issubclass(LexicalError, DfalexError)
        assert issubclass(TransitionTableError, DfalexError)


# =========================================================================
# Illegal characters
# =========================================================================


class TestIllegalCharacter:
    """Characters outside the alphabet, including mid-token."""

    def test_at_start(self, strategy: ScanStrategy) -> None:
        scanner = Scanner("A", strategy)
        with pytest.raises(IllegalCharacterError) as exc_info:
            scanner.next_token()

        err = exc_info.value
        assert (err.state, err.char, err.position) == (State.START, "A", 0)

    def test_mid_token(self, strategy: ScanStrategy) -> None:
        scanner = Scanner("abC", strategy)
        with pytest.raises(IllegalCharacterError) as exc_info:
            scanner.next_token()

        err = exc_info.value
        assert (err.state, err.char, err.position) == (State.IDENT, "C", 2)
        assert scanner.position == 2

    def test_mid_keyword(self, strategy: ScanStrategy) -> None:
        with pytest.raises(IllegalCharacterError) as exc_info:
            Scanner("inT", strategy).next_token()
        assert exc_info.value.state == State.IN

    def test_end_marker_inside_source(self, strategy: ScanStrategy) -> None:
        """The sentinel character is only legal past the end of the source."""
        scanner = Scanner("a$b", strategy)
        with pytest.raises(IllegalCharacterError) as exc_info:
            scanner.next_token()
        assert exc_info.value.position == 1

    def test_after_earlier_tokens(self, strategy: ScanStrategy) -> None:
        """The lookahead is classified before the pending space run is reported."""
        scanner = Scanner("int 9", strategy)
        assert scanner.next_token() == TokenKind.INT_KEYWORD
        with pytest.raises(IllegalCharacterError) as exc_info:
            scanner.next_token()

        err = exc_info.value
        assert (err.state, err.char, err.position) == (State.SPACE, "9", 4)
        assert scanner.position == 4


class TestResync:
    """Callers may skip the offending character and continue."""

    def test_resync_continues(self, strategy: ScanStrategy) -> None:
        scanner = Scanner("ab Cd", strategy)
        assert scanner.next_token() == TokenKind.IDENTIFIER
        with pytest.raises(IllegalCharacterError) as exc_info:
            scanner.next_token()
        assert (exc_info.value.state, exc_info.value.position) == (State.SPACE, 3)

        assert scanner.resync() == "C"
        assert scanner.position == 4
        tokens = list(scanner.tokenize())
        assert [(t.kind, t.value) for t in tokens] == [
            (TokenKind.IDENTIFIER, "d"),
            (TokenKind.EOF, ""),
        ]
        assert scanner.next_token() == TokenKind.EOF

    def test_resync_at_end(self, strategy: ScanStrategy) -> None:
        scanner = Scanner("", strategy)
        assert scanner.resync() == ""
        assert scanner.position == 0


# =========================================================================
# Defensive table paths
# =========================================================================


class TestTableDefects:
    """Paths only reachable with a defective transition table."""

    def test_invalid_table_rejected_at_construction(self) -> None:
        table = _patched(State.START, SymbolClass.LETTER_I, State.START)
        with pytest.raises(TransitionTableError):
            Scanner("i", ScanStrategy.TABLE, table=table)

    def test_explicit_strategy_skips_table_validation(self) -> None:
        table = _patched(State.START, SymbolClass.LETTER_I, State.START)
        scanner = Scanner("i", ScanStrategy.EXPLICIT, table=table)
        assert scanner.next_token() == TokenKind.IDENTIFIER

    def test_soft_error_kind(self) -> None:
        table = _patched(State.START, SymbolClass.LETTER_I, State.START)
        scanner = Scanner("i", ScanStrategy.TABLE, config=UNVALIDATED, table=table)

        assert scanner.next_token() == TokenKind.ERROR
        assert scanner.next_token() == TokenKind.EOF

    def test_no_token(self) -> None:
        """DEAD reached straight from START is a hard error."""
        table = _patched(State.START, SymbolClass.SPACE, State.DEAD)
        scanner = Scanner(" ", ScanStrategy.TABLE, table=table)

        with pytest.raises(NoTokenError) as exc_info:
            scanner.next_token()
        err = exc_info.value
        assert (err.state, err.char, err.position) == (State.START, " ", 0)
        assert scanner.position == 0

    def test_bad_state_value(self) -> None:
        table = _patched(State.START, SymbolClass.OTHER_LOWER, 42)
        scanner = Scanner("a", ScanStrategy.TABLE, config=UNVALIDATED, table=table)

        with pytest.raises(TransitionTableError, match="bad state value 42") as exc_info:
            scanner.next_token()
        assert exc_info.value.state == 42
        assert scanner.position == 0

    def test_short_row(self) -> None:
        rows = [list(row) for row in TRANSITION_TABLE]
        rows[State.IDENT] = rows[State.IDENT][:2]
        scanner = Scanner("ab", ScanStrategy.TABLE, config=UNVALIDATED, table=TableAutomaton(rows))

        with pytest.raises(TransitionTableError, match="no entry for state") as exc_info:
            scanner.next_token()
        assert exc_info.value.state == State.IDENT
        assert scanner.position == 1

    def test_non_integer_entry(self) -> None:
        table = _patched(State.START, SymbolClass.OTHER_LOWER, None)
        scanner = Scanner("a", ScanStrategy.TABLE, config=UNVALIDATED, table=table)

        with pytest.raises(TransitionTableError, match="bad state value None"):
            scanner.next_token()
        assert scanner.position == 0
