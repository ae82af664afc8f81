"""Pydantic models for API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from shobdo.pipeline.schemas import ClassificationResult, OriginType


class CheckWordRequest(BaseModel):
    """Request body for a word check.

    word is deliberately untyped: a non-string value is answered with an
    "invalid" verdict instead of a validation error.
    """

    word: Optional[Any] = Field(None, description="Bengali word to check")


class CheckWordResponse(BaseModel):
    """Verdict for a single word."""

    word: str = Field(..., description="Requested word, trimmed")
    valid: bool = Field(..., description="True only for pure words")
    type: OriginType = Field(..., description="pure | foreign | unknown | invalid")
    reason: str = Field(..., description="Localized explanation")

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "CheckWordResponse":
        return cls(
            word=result.word,
            valid=result.valid,
            type=result.type,
            reason=result.reason,
        )


class HealthModel(BaseModel):
    """Health check response."""

    status: str
    version: str
    pure_words: int
    foreign_words: int
