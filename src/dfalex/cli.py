"""Command-line driver: print the token stream of one input string.

Usage:
    python -m dfalex "i in int intx"
    python -m dfalex "i in int intx" --strategy explicit --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys

from dfalex.automaton.states import state_name
from dfalex.config import ScanConfig, ScanStrategy
from dfalex.errors import DfalexError, LexicalError
from dfalex.scanner import Scanner
from dfalex.tokens import TokenKind


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dfalex", description="DFA-driven lexical scanner")
    ap.add_argument("text", help="input string to scan")
    ap.add_argument(
        "--strategy",
        choices=[s.value for s in ScanStrategy],
        default=ScanStrategy.TABLE.value,
        help="transition function implementation (default: table)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log scanner activity; repeat to trace every transition",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    config = ScanConfig(strategy=ScanStrategy(args.strategy), trace=args.verbose > 1)

    try:
        scanner = Scanner(args.text, config=config)
        while (kind := scanner.next_token()) != TokenKind.EOF:
            print(f"Found token: {kind.label}")
    except LexicalError as e:
        state = state_name(e.state) if e.state is not None else "?"
        print(f"Error in state {state} on char '{e.char}'.", file=sys.stderr)
        return 1
    except DfalexError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
