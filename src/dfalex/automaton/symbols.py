"""Input symbol classes for O(1) classification.

Characters are partitioned into the classes the automaton distinguishes.
The class value doubles as the column index of the transition table.

The legal alphabet is the space character and ``a``-``z``. The ``$``
marker is the end-of-input symbol: the scanner appends ``SENTINEL`` to
every source so the automaton always reaches DEAD at the end.
"""

from __future__ import annotations

from enum import IntEnum

from dfalex.errors import IllegalCharacterError

END_MARKER = "$"
SENTINEL = END_MARKER * 2

LOWERCASE: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")
ALPHABET: frozenset[str] = LOWERCASE | frozenset(" ")


class SymbolClass(IntEnum):
    """Symbol classes; the value is the column index of the transition table."""

    END = 0  # $
    SPACE = 1  # " "
    LETTER_I = 2  # i
    LETTER_N = 3  # n
    LETTER_T = 4  # t
    OTHER_LOWER = 5  # any other lowercase letter


NUM_SYMBOLS = len(SymbolClass)


def classify(char: str) -> SymbolClass:
    """Map a character to its symbol class.

    Args:
        char: A single character

    Returns:
        The symbol class of ``char``.

    Raises:
        IllegalCharacterError: ``char`` is outside the alphabet.
    """
    if char == END_MARKER:
        return SymbolClass.END
    if char == " ":
        return SymbolClass.SPACE
    if char == "i":
        return SymbolClass.LETTER_I
    if char == "n":
        return SymbolClass.LETTER_N
    if char == "t":
        return SymbolClass.LETTER_T
    if char in LOWERCASE:
        return SymbolClass.OTHER_LOWER
    raise IllegalCharacterError(char)


__all__ = [
    "ALPHABET",
    "END_MARKER",
    "LOWERCASE",
    "NUM_SYMBOLS",
    "SENTINEL",
    "SymbolClass",
    "classify",
]
