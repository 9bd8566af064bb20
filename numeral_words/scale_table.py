"""
Scale tables: the vocabulary contract between a language and the greedy engine.

A scale table is an ordered list of (magnitude, word) pairs, largest first,
ending with the zero word:

    [(1_000_000, "million"), (1000, "thousand"), (100, "hundred"),
     (90, "ninety"), ..., (2, "two"), (1, "one"), (0, "zero")]

The greedy engine scans it front to back and takes the first magnitude that
fits, so a table out of order silently produces wrong words. We refuse such a
table the moment it is built instead of at conversion time.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

from .exceptions import ConfigurationError
from .models import ScaleEntry

T = TypeVar("T")


class ScaleTable:
    """Validated, read-only, strictly descending list of scale entries."""

    __slots__ = ("_entries", "_by_magnitude")

    def __init__(self, pairs: Iterable[tuple[int, str]]):
        entries = tuple(ScaleEntry(int(magnitude), word) for magnitude, word in pairs)
        _validate(entries)
        self._entries = entries
        self._by_magnitude = {entry.magnitude: entry.word for entry in entries}

    # ─── Lookups ─────────────────────────────────────────────────────

    def first_at_most(self, n: int) -> ScaleEntry | None:
        """Return the largest entry whose magnitude is <= n."""
        for entry in self._entries:
            if entry.magnitude <= n:
                return entry
        return None

    @property
    def zero_word(self) -> str:
        return self._entries[-1].word

    @property
    def one_word(self) -> str:
        return self._by_magnitude[1]

    @property
    def largest(self) -> ScaleEntry:
        return self._entries[0]

    def __iter__(self) -> Iterator[ScaleEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ScaleTable({len(self._entries)} entries, largest={self.largest.magnitude})"


def _validate(entries: tuple[ScaleEntry, ...]) -> None:
    """Reject tables the greedy match cannot work with."""
    if not entries:
        raise ConfigurationError("SCALE_TABLE_EMPTY", "Scale table has no entries")

    for entry in entries:
        if entry.magnitude < 0:
            raise ConfigurationError(
                "SCALE_TABLE_NEGATIVE_MAGNITUDE",
                f"Scale table entry {entry.word!r} has negative magnitude {entry.magnitude}",
                {"magnitude": entry.magnitude, "word": entry.word},
            )

    for previous, current in zip(entries, entries[1:]):
        if current.magnitude >= previous.magnitude:
            raise ConfigurationError(
                "SCALE_TABLE_NOT_DESCENDING",
                (
                    f"Scale table must be strictly descending: "
                    f"{previous.magnitude} ({previous.word!r}) is followed by "
                    f"{current.magnitude} ({current.word!r})"
                ),
                {"previous": previous.magnitude, "current": current.magnitude},
            )

    if entries[-1].magnitude != 0:
        raise ConfigurationError(
            "SCALE_TABLE_MISSING_ZERO",
            "Scale table must end with a magnitude-0 (zero word) entry",
            {"last_magnitude": entries[-1].magnitude},
        )

    if not any(entry.magnitude == 1 for entry in entries):
        raise ConfigurationError(
            "SCALE_TABLE_MISSING_ONE",
            "Scale table has no magnitude-1 entry for the implicit 'one'",
        )


# ─── Segment Lookups ─────────────────────────────────────────────────


def place_values(segment: int) -> tuple[int, int, int]:
    """Split 0-999 into (ones, tens, hundreds).

    >>> place_values(456)
    (6, 5, 4)
    """
    return segment % 10, (segment // 10) % 10, segment // 100


def lookup_scale_word(words: Sequence[T], position: int, language: str) -> T:
    """Fetch ``words[position]`` or fail with a descriptive configuration error.

    Scale word lists are finite; a number beyond the last listed scale means
    the language table is incomplete for that magnitude.
    """
    if 0 <= position < len(words):
        return words[position]
    raise ConfigurationError(
        "SCALE_INDEX_OUT_OF_RANGE",
        (
            f"Language {language!r} has no scale word at position {position} "
            f"(only {len(words)} known); the number is too large for this vocabulary"
        ),
        {"language": language, "position": position, "known": len(words)},
    )
