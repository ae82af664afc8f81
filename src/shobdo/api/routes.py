"""API route definitions."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, Request

from shobdo import __version__
from shobdo.api.models import CheckWordRequest, CheckWordResponse, HealthModel
from shobdo.pipeline.orchestrator import WordChecker

logger = logging.getLogger(__name__)

router = APIRouter()


def get_checker(request: Request) -> WordChecker:
    """Checker built by the app lifespan."""
    checker = getattr(request.app.state, "checker", None)
    if checker is None:
        raise RuntimeError("Word checker not initialized; app lifespan did not run")
    return checker


async def _read_word(request: Request):
    """Pull the "word" field out of a JSON body, tolerating bad bodies."""
    raw = await request.body()
    if not raw:
        return None
    try:
        body = json.loads(raw)
    except ValueError:
        logger.debug("check-word body is not valid JSON")
        return None
    if not isinstance(body, dict):
        return None
    return CheckWordRequest.model_validate(body).word


@router.post("/check-word", response_model=CheckWordResponse)
async def check_word(
    request: Request,
    checker: WordChecker = Depends(get_checker),
) -> CheckWordResponse:
    """Classify a word as pure or foreign.

    Always answers 200; missing or malformed input yields type "invalid",
    and source failures yield type "unknown".
    """
    word = await _read_word(request)

    # Wiktionary fetch blocks; keep it off the event loop
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, checker.lookup, word)

    return CheckWordResponse.from_result(result)


@router.get("/health", response_model=HealthModel)
async def health_check(checker: WordChecker = Depends(get_checker)) -> HealthModel:
    """Health check endpoint."""
    return HealthModel(
        status="ok",
        version=__version__,
        pure_words=len(checker.lexicon.pure_words),
        foreign_words=len(checker.lexicon.foreign_words),
    )
