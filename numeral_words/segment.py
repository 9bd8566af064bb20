"""
Segment decomposition engine.

Almost every language reads big numbers the same way: split the digits into
fixed-size groups, spell each group, and put a scale word after every group
above the units:

    1,234,567  ->  [1] million [234] thousand [567]
    12,34,567  ->  [12] lakh [34] thousand [567]      (South Asian grouping)

This engine hard-codes that shape and routes every language decision through
the profile hooks (segment_to_words, scale_word_for_index, join_segments). It
is much cheaper than the greedy tree for the common case.
"""

from __future__ import annotations

import logging

from .exceptions import ConfigurationError, InvalidNumberError
from .models import Grouping, Segment
from .profile import LanguageProfile

logger = logging.getLogger(__name__)


def split_segments(n: int, grouping: Grouping = Grouping.THOUSANDS) -> list[Segment]:
    """Split ``n`` into digit groups, least significant first.

    >>> [s.value for s in split_segments(1234567)]
    [567, 234, 1]
    >>> [s.value for s in split_segments(1234567, Grouping.SOUTH_ASIAN)]
    [567, 34, 12]
    """
    if n < 0:
        raise InvalidNumberError(
            "NEGATIVE_INTEGER",
            f"Engines only accept non-negative integers, got {n}",
            {"value": n},
        )

    if n == 0:
        return [Segment(0, 0)]

    segments: list[Segment] = []
    divisor = 10**grouping.first_width
    remaining = n
    while remaining > 0:
        remaining, value = divmod(remaining, divisor)
        segments.append(Segment(value, len(segments)))
        divisor = 10**grouping.rest_width
    return segments


class SegmentEngine:
    """Converts integers for profiles with ``Strategy.SEGMENT``."""

    def __init__(self, profile: LanguageProfile):
        self.profile = profile
        self._first_unit = 10**profile.grouping.first_width

    def integer_to_words(self, n: int) -> str:
        profile = self.profile
        if n == 0:
            return profile.zero_word

        segment_to_words = profile.hook("segment_to_words")

        if 0 < n < self._first_unit:
            return segment_to_words(n, 0)

        scale_word_for_index = profile.hook("scale_word_for_index")
        parts: list[str] = []

        for segment in reversed(split_segments(n, profile.grouping)):
            if segment.value == 0:
                continue

            words = segment_to_words(segment.value, segment.scale_index)
            if words:
                parts.append(words)

            if segment.scale_index > 0:
                scale_word = scale_word_for_index(segment.scale_index, segment.value)
                if scale_word is None:
                    raise ConfigurationError(
                        "SCALE_INDEX_OUT_OF_RANGE",
                        (
                            f"Language {profile.code!r} has no scale word for group "
                            f"{segment.scale_index}; {n} is too large for its vocabulary"
                        ),
                        {"profile": profile.code, "scale_index": segment.scale_index},
                    )
                if scale_word:
                    parts.append(scale_word)

        words = profile.join(parts, n)
        logger.debug("segment[%s] %d -> %r", profile.code, n, words)
        return words
