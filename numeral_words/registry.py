"""
Language registry: language code -> profile factory and its option model.

Profiles are built on demand and cached by (code, options). Options are
validated with the language's pydantic model before anything is built, so a
typo such as ``gender="femenine"`` fails with INVALID_OPTIONS instead of
silently falling back to a default.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from .exceptions import InvalidOptionsError, UnsupportedLanguageError
from .languages import en, es, hi, pt, ru, tr
from .models import GenderOptions, ProfileOptions, TurkicOptions
from .profile import LanguageProfile

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def default_language() -> str:
    """Language used when the caller names none (``NUMERAL_WORDS_DEFAULT_LANGUAGE``)."""
    return os.getenv("NUMERAL_WORDS_DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)


@dataclass(frozen=True)
class LanguageEntry:
    name: str
    factory: Callable[[Any], LanguageProfile]
    options_model: type[ProfileOptions] = ProfileOptions


LANGUAGES: dict[str, LanguageEntry] = {
    "en": LanguageEntry("English", en.build_profile),
    "es": LanguageEntry("Spanish", es.build_profile, GenderOptions),
    "hi": LanguageEntry("Hindi", hi.build_profile),
    "pt": LanguageEntry("Portuguese", pt.build_profile),
    "ru": LanguageEntry("Russian", ru.build_profile, GenderOptions),
    "tr": LanguageEntry("Turkish", tr.build_profile, TurkicOptions),
}


def available_languages() -> list[str]:
    return sorted(LANGUAGES)


def get_profile(language: str | None = None, /, **options: Any) -> LanguageProfile:
    """Return the profile for ``language`` built with ``options``.

    Raises:
        UnsupportedLanguageError: no profile is registered for the code.
        InvalidOptionsError: the options do not validate for this language.
    """
    language = language or default_language()
    entry = LANGUAGES.get(language)
    if entry is None:
        raise UnsupportedLanguageError(language, available_languages())

    try:
        validated = entry.options_model(**options)
    except ValidationError as exc:
        raise InvalidOptionsError(
            f"Invalid options for language {language!r}: {exc.error_count()} error(s)",
            {
                "language": language,
                "errors": exc.errors(include_url=False, include_context=False),
            },
        ) from exc

    return _build_profile(language, validated)


@lru_cache(maxsize=64)
def _build_profile(language: str, options: ProfileOptions) -> LanguageProfile:
    # Option models are frozen pydantic models, hence hashable cache keys.
    logger.debug("building %s profile with %r", language, options)
    return LANGUAGES[language].factory(options)
