"""Word lookup pipeline."""

from shobdo.pipeline.schemas import (
    REASONS,
    ClassificationResult,
    OriginType,
    reason_text,
)
from shobdo.pipeline.orchestrator import WordChecker, get_default_checker, lookup

__all__ = [
    "REASONS",
    "ClassificationResult",
    "OriginType",
    "reason_text",
    "WordChecker",
    "get_default_checker",
    "lookup",
]
