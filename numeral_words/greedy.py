"""
Greedy decomposition engine.

Two steps turn an integer into words:

  1. decompose(): match the number against the scale table, largest scale
     first, building a tree of (word, value) leaves. A multiplier bigger than
     one is decomposed recursively and nested in front of its scale word:

         1234 -> [one, thousand, [one, two], hundred, one, thirty, one, four]

  2. reduce_word_sets(): fold the tree into a single WordSet by repeatedly
     merging the first two leaves with the language's ``combine`` hook. The
     hook decides the grammar (drop the implicit "one", pluralize, insert
     "and"); the engine only decides the order of merges.

Every merge either multiplies (the following value is bigger) or adds, so the
final value always equals the input. We check that at the end: a combine hook
that breaks the accounting is a broken language module.
"""

from __future__ import annotations

import logging

from .exceptions import ConfigurationError, InvalidNumberError
from .models import DecompositionNode, WordSet
from .profile import Combine, LanguageProfile
from .scale_table import ScaleTable

logger = logging.getLogger(__name__)


# ─── Decomposition ──────────────────────────────────────────────────


def decompose(n: int, table: ScaleTable) -> list[DecompositionNode]:
    """Decompose ``n`` into a tree of word-sets using greedy scale matching.

    Args:
        n: non-negative integer.
        table: validated, descending scale table.

    Returns:
        A list of WordSet leaves and nested lists (recursive multipliers).

    Raises:
        InvalidNumberError: if ``n`` is negative.
        ConfigurationError: if the table cannot express ``n``.
    """
    if n < 0:
        raise InvalidNumberError(
            "NEGATIVE_INTEGER",
            f"Engines only accept non-negative integers, got {n}",
            {"value": n},
        )

    nodes: list[DecompositionNode] = []
    remaining = n

    while True:
        entry = table.first_at_most(remaining)
        if entry is None:
            raise ConfigurationError(
                "SCALE_TABLE_NO_MATCH",
                f"No scale table entry is <= {remaining}",
                {"value": remaining},
            )

        multiplier = 1 if remaining == 0 else remaining // entry.magnitude

        if multiplier == 1:
            nodes.append(WordSet(table.one_word, 1))
        elif multiplier >= remaining:
            # Only happens when the best match is the magnitude-1 entry.
            raise ConfigurationError(
                "SCALE_TABLE_INCOMPLETE",
                f"Scale table has no word for {remaining}",
                {"value": remaining},
            )
        elif multiplier >= entry.magnitude:
            # "thousand thousand" cannot be merged back: the table ran out of scales.
            raise ConfigurationError(
                "SCALE_INDEX_OUT_OF_RANGE",
                (
                    f"Number needs a multiplier of {entry.word!r} at least as large as "
                    f"{entry.magnitude} itself; the scale table has no larger scale"
                ),
                {"value": remaining, "largest": entry.magnitude},
            )
        else:
            nodes.append(decompose(multiplier, table))

        nodes.append(WordSet(entry.word, entry.magnitude))

        remaining = 0 if remaining == 0 else remaining % entry.magnitude
        if remaining == 0:
            return nodes


# ─── Reduction ──────────────────────────────────────────────────────


def reduce_word_sets(node: DecompositionNode, combine: Combine) -> WordSet:
    """Fold a decomposition tree into one WordSet.

    While more than one element remains: if the first two are both leaves,
    merge them and regroup everything after them as one nested list;
    otherwise collapse every nested list (single-element lists unwrap,
    longer ones reduce recursively) and try again.
    """
    if isinstance(node, WordSet):
        return node

    items = list(node)
    if not items:
        raise ConfigurationError("EMPTY_DECOMPOSITION", "Nothing to reduce")

    while len(items) > 1:
        first, second, *rest = items
        if isinstance(first, WordSet) and isinstance(second, WordSet):
            merged = combine(first, second)
            items = [merged, rest] if rest else [merged]
            continue
        items = [_collapse(item, combine) for item in items]

    return reduce_word_sets(items[0], combine)


def _collapse(item: DecompositionNode, combine: Combine) -> DecompositionNode:
    if isinstance(item, WordSet):
        return item
    if len(item) == 1:
        return item[0]
    return reduce_word_sets(item, combine)


# ─── Default Merge Policy ───────────────────────────────────────────


def join_words(separator: str, *words: str) -> str:
    """Join non-empty words; an empty word means "drop this piece"."""
    return separator.join(word for word in words if word)


def default_combine(
    preceding: WordSet,
    following: WordSet,
    separator: str = " ",
    implicit_one_below: int = 100,
) -> WordSet:
    """Starting-point merge rule for new profiles.

    The magnitude-1 multiplier is dropped before anything smaller than
    ``implicit_one_below`` ("twenty", not "one twenty"). Raise the threshold
    to 1001 for languages that say "hundred" and "thousand" without a "one".

    A bigger following value means multiplication ("two" + "hundred"),
    anything else is addition ("twenty" + "three").
    """
    if preceding.value == 1 and following.value < implicit_one_below:
        return following

    if following.value > preceding.value:
        value = preceding.value * following.value
    else:
        value = preceding.value + following.value
    return WordSet(join_words(separator, preceding.word, following.word), value)


# ─── Engine ─────────────────────────────────────────────────────────


class GreedyEngine:
    """Converts integers for profiles with ``Strategy.GREEDY``.

    Usage:
        engine = GreedyEngine(profile)
        engine.integer_to_words(1234)
    """

    def __init__(self, profile: LanguageProfile):
        self.profile = profile

    def word_set(self, n: int) -> WordSet:
        """Decompose and reduce ``n`` without any final formatting."""
        combine = self.profile.hook("combine")
        assert self.profile.scale_table is not None  # enforced by LanguageProfile
        reduced = reduce_word_sets(decompose(n, self.profile.scale_table), combine)

        if reduced.value != n:
            raise ConfigurationError(
                "MERGE_VALUE_MISMATCH",
                (
                    f"Combine hook of {self.profile.code!r} produced value "
                    f"{reduced.value} for input {n}"
                ),
                {"profile": self.profile.code, "expected": n, "actual": reduced.value},
            )
        return reduced

    def integer_to_words(self, n: int) -> str:
        if n == 0:
            return self.profile.zero_word
        words = self.word_set(n).word.strip()
        logger.debug("greedy[%s] %d -> %r", self.profile.code, n, words)
        return words
