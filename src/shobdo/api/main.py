"""FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shobdo import __version__
from shobdo.api.routes import router
from shobdo.config import Settings
from shobdo.pipeline.orchestrator import WordChecker

logger = logging.getLogger(__name__)


def create_app(checker: WordChecker | None = None) -> FastAPI:
    """Create the word-check API application.

    Args:
        checker: Checker to serve (default: built from SHOBDO_* settings
            at startup; a missing or invalid lexicon fails startup)

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Load the lexicon before the first request is served
        if app.state.checker is None:
            app.state.checker = WordChecker(settings=Settings.from_env())

        lexicon = app.state.checker.lexicon
        logger.info(
            f"Shobdo API started ({len(lexicon.pure_words)} pure, "
            f"{len(lexicon.foreign_words)} foreign words)"
        )

        yield

        app.state.checker = checker
        logger.info("Shobdo API stopped")

    app = FastAPI(
        title="Shobdo",
        description="Bengali word-origin checker",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.checker = checker

    # The quiz front end is served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Shobdo",
            "version": __version__,
            "docs": "/docs",
            "api": "/api",
        }

    return app


app = create_app()
