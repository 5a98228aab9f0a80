"""DFA-driven scanner for dfalex.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (engine composition + cursor)
└── engines/             # One longest-match loop per strategy
    ├── explicit.py      # Per-state branching
    └── table.py         # Transition table lookup

Usage:
    >>> from dfalex.scanner import Scanner
    >>> scanner = Scanner("int intx")
    >>> scanner.next_token()
    <TokenKind.INT_KEYWORD: 4>

"""

from dfalex.scanner.core import Scanner

__all__ = ["Scanner"]
