"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from readme_synth.interface.dependencies import lifespan
from readme_synth.interface.error_handlers import register_error_handlers
from readme_synth.interface.routes import router

DESCRIPTION = (
    "Reads a GitHub repository (or a list of source files) and returns README "
    "documentation. Existing sections are kept; missing ones are generated or "
    "filled from templates."
)


def create_app() -> FastAPI:
    """Build the service: shared clients via the lifespan, error envelope, routes."""
    app = FastAPI(
        title="README Synthesizer",
        version="1.0.0",
        description=DESCRIPTION,
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(router)
    return app
