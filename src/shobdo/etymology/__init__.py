"""Etymology extraction and marker-based origin classification."""

from shobdo.etymology.classifier import OriginVerdict, classify_origin, find_marker
from shobdo.etymology.extractor import extract_etymology

__all__ = [
    "OriginVerdict",
    "classify_origin",
    "extract_etymology",
    "find_marker",
]
