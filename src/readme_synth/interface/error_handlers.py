"""Global exception handlers: translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "code": "...", "message": "..."}`` envelope.
Anything not listed is an internal failure (500).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from readme_synth.domain.exceptions import (
    InvalidFileListError,
    InvalidRepositoryUrlError,
    NoEligibleFilesError,
    ReadmeSynthError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[ReadmeSynthError], int]] = [
    (InvalidRepositoryUrlError, 400),
    (InvalidFileListError, 400),
    (RepositoryNotFoundError, 404),
    (NoEligibleFilesError, 400),
]


def _error_json(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "code": code, "message": message},
    )


def status_for(exc: ReadmeSynthError) -> int:
    for exc_type, status_code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(ReadmeSynthError)
    async def domain_handler(request: Request, exc: ReadmeSynthError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc)
        else:
            logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_code, exc.code, str(exc))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(400, "invalid-request", "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(
            500, "internal-error", "An unexpected error occurred. Please try again later."
        )
