"""
Exception hierarchy for numeral-to-words conversion.

Two families matter here:
  - Configuration errors: a language module is broken (bad scale table,
    missing scale word, missing hook). These are programmer errors and are
    raised as early as possible, ideally while the profile is being built.
  - Input errors: the caller handed us something that is not a number, or
    options the language does not understand.

Every exception carries a machine-readable ``code`` and a ``details`` dict so
callers (the API layer in particular) can report failures precisely.
"""

from __future__ import annotations


class NumeralWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(NumeralWordsError):
    """A language profile is malformed (table order, zero entry, scale words)."""


class UnimplementedHookError(ConfigurationError):
    """A profile did not supply a hook that the selected engine needs."""

    def __init__(self, hook: str, profile: str, details: dict | None = None):
        self.hook = hook
        super().__init__(
            "HOOK_NOT_IMPLEMENTED",
            f"Language profile {profile!r} does not implement the {hook!r} hook",
            {"hook": hook, "profile": profile, **(details or {})},
        )


class InvalidNumberError(NumeralWordsError):
    """The input value cannot be normalized into sign, integer and decimal digits."""


class InvalidOptionsError(NumeralWordsError):
    """Options passed for a language failed validation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_OPTIONS", message, details)


class UnsupportedLanguageError(NumeralWordsError):
    """No profile is registered for the requested language code."""

    def __init__(self, language: str, available: list[str]):
        super().__init__(
            "UNSUPPORTED_LANGUAGE",
            f"Unsupported language: {language!r}",
            {"language": language, "available": available},
        )
