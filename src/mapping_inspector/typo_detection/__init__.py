"""Typo detection exports."""

from .typo_finder import DEFAULT_SIMILARITY_THRESHOLD, META_FIELDS, find_typos, similarity
from .typo_outcomes import TypoCorrection, TypoReport

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "META_FIELDS",
    "TypoCorrection",
    "TypoReport",
    "find_typos",
    "similarity",
]
