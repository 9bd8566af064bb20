#!/usr/bin/env python3
"""
Numeral Words: Entry Point
==========================

Spell one number, or show a demo table across every registered language.

Usage:
    python main.py                               # Demo table
    python main.py 1234.05                       # English (default language)
    python main.py 21 --lang es --option gender=feminine
    NUMERAL_WORDS_LOG_LEVEL=DEBUG python main.py 1e21 --lang tr
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from numeral_words.converter import NumeralConverter
from numeral_words.exceptions import ConfigurationError, NumeralWordsError
from numeral_words.registry import LANGUAGES, available_languages

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Demo Values ─────────────────────────────────────────────────────

DEMO_VALUES = ["0", "7", "23", "100", "1001", "21000", "1234567", "-3.14", "0.05"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Argument Parsing ────────────────────────────────────────────────


def _parse_option(raw: str) -> tuple[str, str | bool]:
    """Parse ``key=value``; "true"/"false" become booleans."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    lowered = value.lower()
    if lowered in ("true", "false"):
        return key, lowered == "true"
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numeral-words",
        description="Spell numbers as words.",
    )
    parser.add_argument("value", nargs="?", help="number to convert (omit for a demo table)")
    parser.add_argument(
        "--lang",
        default=None,
        choices=available_languages(),
        help="language code (default: NUMERAL_WORDS_DEFAULT_LANGUAGE or en)",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        type=_parse_option,
        metavar="KEY=VALUE",
        help="language option, repeatable (e.g. gender=feminine, drop_spaces=true)",
    )
    return parser


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_demo() -> None:
    """Print every demo value in every registered language."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMERAL WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    for code in available_languages():
        converter = NumeralConverter(code)
        print(f"\n  {_BOLD}{LANGUAGES[code].name} ({code}){_RESET}")
        print(f"{'─' * _WIDTH}")
        for value in DEMO_VALUES:
            print(f"  {_DIM}{value:>10}{_RESET}  {converter.run(value)}")

    print(f"\n{'=' * _WIDTH}\n")


def print_error(exc: NumeralWordsError) -> None:
    print(f"{_RED}{_BOLD}[{exc.code}]{_RESET} {exc}", file=sys.stderr)
    for k, v in exc.details.items():
        print(f"  {_DIM}{k}: {v}{_RESET}", file=sys.stderr)


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the requested value (or print the demo) and return an exit code.

    Returns:
        0 on success, 1 for bad input or options, 2 for a broken language module.
    """
    logging.basicConfig(
        level=os.getenv("NUMERAL_WORDS_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.value is None:
            print_demo()
            return 0
        converter = NumeralConverter(args.lang, **dict(args.option))
        print(f"{_GREEN}{converter.run(args.value)}{_RESET}")
    except ConfigurationError as exc:
        print_error(exc)
        return 2
    except NumeralWordsError as exc:
        print_error(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
