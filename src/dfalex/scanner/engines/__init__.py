"""Scanning engines for the dfalex scanner.

Each engine is a mixin implementing the longest-match loop over one
materialization of the automaton (EXPLICIT or TABLE strategy).
"""

from __future__ import annotations

from dfalex.scanner.engines.explicit import ExplicitEngineMixin
from dfalex.scanner.engines.table import TableEngineMixin

__all__ = [
    "ExplicitEngineMixin",
    "TableEngineMixin",
]
