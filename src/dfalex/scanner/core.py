"""DFA-driven scanner with longest-match-with-backtrack semantics.

Each call to ``next_token()`` runs the automaton from START until it
reaches DEAD, then reports the kind of the last accepting state seen.
The character that led to DEAD is pushed back so the next call starts
on it.

The source is buffered once with a two-character ``$$`` sentinel
appended. The sentinel is outside every non-dead transition, so every
scan reaches DEAD and terminates.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; the automata are immutable and shared.

"""

from __future__ import annotations

from collections.abc import Iterator

from dfalex.automaton.states import state_name
from dfalex.automaton.symbols import END_MARKER, SENTINEL, SymbolClass, classify
from dfalex.automaton.table import TABLE_AUTOMATON, TableAutomaton
from dfalex.config import ScanConfig, ScanStrategy, get_scan_config
from dfalex.errors import IllegalCharacterError
from dfalex.scanner.engines import ExplicitEngineMixin, TableEngineMixin
from dfalex.tokens import Token, TokenKind
from dfalex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    ExplicitEngineMixin,
    TableEngineMixin,
):
    """DFA scanner over a single source string.

    Usage:
        >>> scanner = Scanner("i in int intx")
        >>> for token in scanner.tokenize():
        ...     print(token)
        Token(IDENTIFIER, 'i', 0:1)
        Token(WHITESPACE, ' ', 1:2)
        Token(IDENTIFIER, 'in', 2:4)
        Token(WHITESPACE, ' ', 4:5)
        Token(INT_KEYWORD, 'int', 5:8)
        Token(WHITESPACE, ' ', 8:9)
        Token(IDENTIFIER, 'intx', 9:13)
        Token(EOF, '', 13:13)

    Error recovery:
        A LexicalError leaves the cursor on the offending character.
        Call ``resync()`` to skip it and continue scanning.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_input",  # source + SENTINEL
        "_pos",
        "_strategy",
        "_trace",
        "_table_automaton",
    )

    def __init__(
        self,
        source: str,
        strategy: ScanStrategy | str | None = None,
        *,
        config: ScanConfig | None = None,
        table: TableAutomaton | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Text to scan
            strategy: Transition strategy; defaults to the config's strategy
            config: Scan configuration; defaults to the active context config
            table: Table automaton for the TABLE strategy
                (defaults to the shipped transition table)

        Raises:
            TransitionTableError: The table fails validation
                (TABLE strategy with ``validate_table`` enabled).
        """
        if config is None:
            config = get_scan_config()

        self._source = source
        self._source_len = len(source)
        self._input = source + SENTINEL
        self._pos = 0
        self._strategy = ScanStrategy(strategy) if strategy is not None else config.strategy
        self._trace = config.trace
        self._table_automaton = table if table is not None else TABLE_AUTOMATON

        if self._strategy == ScanStrategy.TABLE and config.validate_table:
            self._table_automaton.validate()

        logger.debug(
            "Scanner created: strategy=%s, %d chars",
            self._strategy.value,
            self._source_len,
        )

    @property
    def strategy(self) -> ScanStrategy:
        return self._strategy

    @property
    def position(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True once every source character has been consumed."""
        return self._at_sentinel()

    def next_token(self) -> TokenKind:
        """Scan the next token.

        Returns:
            Kind of the longest token at the cursor; ``TokenKind.EOF`` at
            the end of the stream, and on every call after that.

        Raises:
            IllegalCharacterError: A character outside the alphabet was read.
            NoTokenError: No token can be formed at the cursor.
        """
        if self._strategy == ScanStrategy.EXPLICIT:
            return self._scan_explicit()
        return self._scan_table()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the rest of the source.

        Yields:
            Token objects one at a time, ending with exactly one EOF token.

        Complexity: O(n) where n = len(source)
        """
        while True:
            start = self._pos
            kind = self.next_token()
            end = self._pos
            yield Token(kind, self._source[start:end], start, end)
            if kind == TokenKind.EOF:
                return

    def resync(self) -> str:
        """Skip the character at the cursor after a LexicalError.

        Characters of the abandoned token before it stay consumed.

        Returns:
            The skipped character, or "" at the end of the stream.
        """
        if self._at_sentinel():
            return ""
        char = self._input[self._pos]
        logger.warning("Skipping %r at offset %d", char, self._pos)
        self._pos += 1
        return char

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _at_sentinel(self) -> bool:
        return self._pos >= self._source_len

    def _advance(self) -> str:
        """Consume one character from the buffer.

        Never moves past the first sentinel character: the END symbol
        always leads to DEAD, which pushes it back.
        """
        char = self._input[self._pos]
        self._pos += 1
        return char

    def _pushback(self) -> None:
        self._pos -= 1

    def _classify(self, char: str, state: int, position: int) -> SymbolClass:
        """Classify ``char`` read at ``position`` while in ``state``.

        On error the cursor is moved back onto the offending character.

        Raises:
            IllegalCharacterError: ``char`` is outside the alphabet, or is
                the end marker inside the caller's source.
        """
        if char == END_MARKER and position < self._source_len:
            self._pos = position
            raise IllegalCharacterError(char, state=state, position=position)
        try:
            return classify(char)
        except IllegalCharacterError:
            self._pos = position
            raise IllegalCharacterError(char, state=state, position=position) from None

    def _trace_step(self, state: int, char: str, position: int, next_state: int) -> None:
        if self._trace:
            logger.debug(
                "state=%s char=%r pos=%d -> %s",
                state_name(state),
                char,
                position,
                state_name(next_state),
            )

