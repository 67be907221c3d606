"""Typo detection entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypoCorrection:
    """A requested path paired with the closest real path."""

    original: str
    suggestion: str


@dataclass(frozen=True)
class TypoReport:
    """Ordered corrections for the requested paths that look like typos."""

    corrections: tuple[TypoCorrection, ...]

    @property
    def originals(self) -> list[str]:
        return [correction.original for correction in self.corrections]

    @property
    def suggestions(self) -> list[str]:
        return [correction.suggestion for correction in self.corrections]

    def as_mapping(self) -> dict[str, str]:
        """Return corrections keyed by the requested path, in request order."""
        return {correction.original: correction.suggestion for correction in self.corrections}
