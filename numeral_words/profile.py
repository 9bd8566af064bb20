"""
Language profiles: the fixed set of words and hooks both engines are driven by.

A profile is plain data plus callables. There is no class hierarchy: a
language picks an engine (``strategy``) and fills in the hooks that engine
calls, usually by composing one of the family helpers in ``families.py``.

Hook contracts:
    combine(preceding: WordSet, following: WordSet) -> WordSet
        greedy engine; merge two adjacent word-sets into one
    segment_to_words(segment: int, scale_index: int) -> str
        segment engine; spell one digit group ("" drops it)
    scale_word_for_index(scale_index: int, segment: int) -> str | None
        segment engine; scale word for group >= 1 (None = unknown scale)
    join_segments(parts: list[str], value: int) -> str
        segment engine; assemble group strings (default: word separator)
    cleanup(text: str) -> str
        orchestrator; final cosmetic pass, must be idempotent

Profiles are frozen after construction and safe to share between threads.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from .exceptions import ConfigurationError, UnimplementedHookError
from .models import DecimalMode, Grouping, ProfileOptions, Strategy, WordSet
from .scale_table import ScaleTable

Combine = Callable[[WordSet, WordSet], WordSet]
SegmentToWords = Callable[[int, int], str]
ScaleWordForIndex = Callable[[int, int], Optional[str]]
JoinSegments = Callable[[list[str], int], str]
Cleanup = Callable[[str], str]

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def normalize_whitespace(text: str) -> str:
    """Default cleanup: collapse whitespace runs and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable per-language configuration consumed by the engines."""

    code: str
    name: str
    zero_word: str
    negative_word: str
    decimal_separator_word: str
    strategy: Strategy
    word_separator: str = " "
    decimal_mode: DecimalMode = DecimalMode.GROUPED
    grouping: Grouping = Grouping.THOUSANDS
    scale_table: Optional[ScaleTable] = None
    combine: Optional[Combine] = None
    segment_to_words: Optional[SegmentToWords] = None
    scale_word_for_index: Optional[ScaleWordForIndex] = None
    join_segments: Optional[JoinSegments] = None
    cleanup: Cleanup = normalize_whitespace
    options: ProfileOptions = field(default_factory=ProfileOptions)

    def __post_init__(self) -> None:
        if not self.zero_word:
            raise ConfigurationError(
                "PROFILE_MISSING_ZERO_WORD",
                f"Language profile {self.code!r} has no zero word",
                {"profile": self.code},
            )

        table: Any = self.scale_table
        if table is not None and not isinstance(table, ScaleTable):
            # Plain (magnitude, word) pairs are validated here, at construction.
            object.__setattr__(self, "scale_table", ScaleTable(table))

        if self.strategy is Strategy.GREEDY and self.scale_table is None:
            raise ConfigurationError(
                "PROFILE_MISSING_SCALE_TABLE",
                f"Greedy language profile {self.code!r} needs a scale table",
                {"profile": self.code},
            )

    def hook(self, name: str) -> Callable[..., Any]:
        """Return the named hook, or fail loudly if the profile left it out."""
        implementation = getattr(self, name, None)
        if implementation is None:
            raise UnimplementedHookError(name, self.code)
        return implementation

    def join(self, parts: list[str], value: int) -> str:
        if self.join_segments is not None:
            return self.join_segments(parts, value)
        return self.word_separator.join(parts)
