"""
Numeral Words: FastAPI Server
=============================

HTTP API for spelling numbers as words.

Endpoints:
    POST /convert           Convert one number in one language
    GET  /languages         Registered languages and the options they accept
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numeral_words import __version__
from numeral_words.converter import NumeralConverter
from numeral_words.exceptions import (
    ConfigurationError,
    InvalidNumberError,
    InvalidOptionsError,
    NumeralWordsError,
    UnsupportedLanguageError,
)
from numeral_words.registry import LANGUAGES, available_languages, get_profile

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm profiles) ───────────────────────

_profiles_loaded: int = 0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build every language profile once on startup so bad tables fail fast."""
    global _profiles_loaded  # noqa: PLW0603
    for code in available_languages():
        get_profile(code)
    _profiles_loaded = len(LANGUAGES)
    yield
    _profiles_loaded = 0


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Words API",
    description=(
        "Spell arbitrary-precision numbers as words. "
        "Greedy and segment-based engines, per-language grammar hooks, "
        "South Asian grouping, grammatical gender options."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    # Large numbers lose precision in JSON floats; send them as strings.
    value: Union[int, str] = Field(
        ...,
        description="Integer, or a decimal string such as '-3.14' or '1e21'.",
        json_schema_extra={"example": "1234.05"},
    )
    language: str | None = Field(
        default=None,
        description="Language code; defaults to NUMERAL_WORDS_DEFAULT_LANGUAGE or 'en'.",
        json_schema_extra={"example": "en"},
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Per-language options, e.g. {'gender': 'feminine'}.",
    )


class ConvertResponse(BaseModel):
    words: str
    language: str
    input: str

    model_config = {"json_schema_extra": {"example": {
        "words": "one thousand two hundred and thirty-four point zero five",
        "language": "en",
        "input": "1234.05",
    }}}


class LanguageOut(BaseModel):
    code: str
    name: str
    options: dict[str, Any] = Field(description="JSON schema of the accepted options")


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _http_error(exc: NumeralWordsError) -> HTTPException:
    """Map library errors onto HTTP status codes."""
    if isinstance(exc, UnsupportedLanguageError):
        status = 404
    elif isinstance(exc, (InvalidNumberError, InvalidOptionsError)):
        status = 422
    elif isinstance(exc, ConfigurationError):
        logger.error("language configuration error: %s", exc)
        status = 500
    else:
        status = 400
    return HTTPException(
        status_code=status,
        detail={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown language code"},
        422: {"description": "Invalid number or invalid options"},
        500: {"description": "Broken language configuration"},
    },
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Spell ``value`` in ``language``.

    - **value**: integer or decimal string (scientific notation accepted)
    - **language**: code from `GET /languages`
    - **options**: language options such as `gender` or `drop_spaces`
    """
    try:
        converter = NumeralConverter(request.language, **request.options)
        words = converter.run(request.value)
    except NumeralWordsError as exc:
        raise _http_error(exc) from exc

    return ConvertResponse(
        words=words,
        language=converter.language,
        input=str(request.value),
    )


@app.get("/languages", summary="List languages", tags=["Conversion"])
def list_languages() -> list[LanguageOut]:
    """Registered languages with the JSON schema of their options."""
    return [
        LanguageOut(
            code=code,
            name=LANGUAGES[code].name,
            options=LANGUAGES[code].options_model.model_json_schema(),
        )
        for code in available_languages()
    ]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Profiles not yet loaded"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    if not _profiles_loaded:
        raise HTTPException(status_code=503, detail="Language profiles not loaded")
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=_profiles_loaded,
    )
