"""
dfalex — DFA-driven lexical scanner

A longest-match scanner over a fixed deterministic finite automaton that
recognizes whitespace runs, lowercase identifiers and the reserved
keyword ``int``. The transition function ships in two equivalent forms:
explicit per-state branching and a dense transition table.

Quick Start:
    >>> from dfalex import scan, tokenize
    >>> scan("i in int intx")
    [<TokenKind.IDENTIFIER: 3>, <TokenKind.WHITESPACE: 2>, ...]

    >>> # Or drive the scanner yourself
    >>> from dfalex import Scanner, ScanStrategy, TokenKind
    >>> scanner = Scanner("int", ScanStrategy.EXPLICIT)
    >>> scanner.next_token()
    <TokenKind.INT_KEYWORD: 4>
    >>> scanner.next_token()
    <TokenKind.EOF: 1>

Command line:
    python -m dfalex "i in int intx" --strategy explicit
"""

from dfalex.automaton import (
    EXPLICIT_AUTOMATON,
    TABLE_AUTOMATON,
    ExplicitAutomaton,
    State,
    SymbolClass,
    TableAutomaton,
    classify,
)
from dfalex.config import (
    ScanConfig,
    ScanStrategy,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from dfalex.errors import (
    DfalexError,
    IllegalCharacterError,
    LexicalError,
    NoTokenError,
    TransitionTableError,
)
from dfalex.protocols import Automaton
from dfalex.scanner import Scanner
from dfalex.tokens import Token, TokenKind

__version__ = "0.1.0"


def scan(source: str, strategy: ScanStrategy | str | None = None) -> list[TokenKind]:
    """Scan source into token kinds, excluding the final EOF.

    Args:
        source: Text to scan
        strategy: Transition strategy (defaults to the active config)

    Returns:
        Token kinds in source order.

    Raises:
        LexicalError: The source cannot be tokenized.
    """
    scanner = Scanner(source, strategy)
    kinds = []
    while (kind := scanner.next_token()) != TokenKind.EOF:
        kinds.append(kind)
    return kinds


def tokenize(source: str, strategy: ScanStrategy | str | None = None) -> list[Token]:
    """Tokenize source into tokens with lexemes and offsets.

    The list ends with exactly one EOF token.

    Raises:
        LexicalError: The source cannot be tokenized.
    """
    return list(Scanner(source, strategy).tokenize())


__all__ = [
    # Core API
    "scan",
    "tokenize",
    "Scanner",
    "Token",
    "TokenKind",
    # Automaton
    "Automaton",
    "EXPLICIT_AUTOMATON",
    "ExplicitAutomaton",
    "State",
    "SymbolClass",
    "TABLE_AUTOMATON",
    "TableAutomaton",
    "classify",
    # Configuration
    "ScanConfig",
    "ScanStrategy",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "DfalexError",
    "IllegalCharacterError",
    "LexicalError",
    "NoTokenError",
    "TransitionTableError",
]
