"""
Value types shared by the engines, the orchestrator and the API layer.

Hot-path values (WordSet, ScaleEntry, Segment) are frozen dataclasses: they
are created and thrown away many times per conversion. Boundary values
(NumericInput and the per-language option models) are pydantic models, so
bad data fails loudly where it enters the system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


# ─── Enumerations ───────────────────────────────────────────────────


class Strategy(str, Enum):
    """Which engine a profile routes its integers through."""

    GREEDY = "greedy"
    SEGMENT = "segment"


class DecimalMode(str, Enum):
    """How the digits after the decimal point are read."""

    GROUPED = "grouped"  # leading zeros one by one, the rest as one number
    PER_DIGIT = "per_digit"  # every digit on its own


class Grouping(str, Enum):
    """Digit grouping used by the segment engine."""

    THOUSANDS = "thousands"  # 1,234,567
    SOUTH_ASIAN = "south_asian"  # 12,34,567

    @property
    def first_width(self) -> int:
        return 3

    @property
    def rest_width(self) -> int:
        return 2 if self is Grouping.SOUTH_ASIAN else 3


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


# ─── Engine Values ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleEntry:
    """One row of a scale table: a magnitude and the word that names it."""

    magnitude: int
    word: str


@dataclass(frozen=True)
class WordSet:
    """A partial phrase together with the number it spells."""

    word: str
    value: int


# A decomposition tree: either a leaf or an ordered list of sub-trees.
DecompositionNode = Union[WordSet, list]


@dataclass(frozen=True)
class Segment:
    """A fixed-width digit group and its position (0 = units)."""

    value: int
    scale_index: int


# ─── Boundary Models ────────────────────────────────────────────────


class NumericInput(BaseModel):
    """A number split into sign, integer part and raw decimal digits."""

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_part: int = Field(ge=0)
    decimal_digits: str = Field(default="", pattern=r"^[0-9]*$")


class ProfileOptions(BaseModel):
    """Base class for per-language options. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class GenderOptions(ProfileOptions):
    gender: Gender = Gender.MASCULINE


class TurkicOptions(ProfileOptions):
    drop_spaces: bool = False
