"""Typo suggestion service for dotted field paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from rapidfuzz.distance import OSA

from mapping_inspector.field_model import Field, field_lookup, join_path
from mapping_inspector.field_model.field_paths import PATH_SEPARATOR

from .typo_outcomes import TypoCorrection, TypoReport

DEFAULT_SIMILARITY_THRESHOLD = 0.5

META_FIELDS: frozenset[str] = frozenset(
    {
        "_all",
        "_field_names",
        "_id",
        "_index",
        "_parent",
        "_routing",
        "_source",
        "_timestamp",
        "_ttl",
        "_type",
        "_uid",
        "_version",
    }
)


@dataclass(frozen=True)
class _Level:
    """Siblings at one depth of the tree together with their parent path."""

    prefix: str
    fields: tuple[Field, ...]


@dataclass(frozen=True)
class _Candidate:
    path: str
    score: float


def find_typos(
    requested_paths: Iterable[str],
    root: Field,
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> TypoReport | None:
    """Suggest real paths for requested paths that do not exist in the tree.

    Requested paths that already exist, and built-in meta fields, are never
    reported. Paths without a plausible correction are left out. Returns None
    when no requested path yields a correction.
    """
    if not 0 < threshold <= 1:
        raise ValueError("threshold must be in the range (0, 1].")

    known_paths = field_lookup(root)
    levels = tuple(_iter_levels(root))
    corrections: list[TypoCorrection] = []
    for requested in requested_paths:
        if requested in known_paths or requested in META_FIELDS:
            continue
        suggestion = _suggest_path(requested, levels, threshold=threshold)
        if suggestion is not None:
            corrections.append(TypoCorrection(original=requested, suggestion=suggestion))

    if not corrections:
        return None
    return TypoReport(corrections=tuple(corrections))


def similarity(segment: str, name: str) -> float:
    """Case-sensitive similarity in [0, 1] from the optimal string alignment distance."""
    return OSA.normalized_similarity(segment, name)


def _suggest_path(
    requested: str,
    levels: Sequence[_Level],
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> str | None:
    segments = requested.split(PATH_SEPARATOR)
    if not all(segments):
        return None

    best: _Candidate | None = None
    for level in levels:
        candidate = _walk_segments(segments, level, threshold)
        # earlier levels win ties, so only a strictly better score replaces
        if candidate is not None and (best is None or candidate.score > best.score):
            best = candidate
    return best.path if best is not None else None


def _walk_segments(segments: Sequence[str], level: _Level, threshold: float) -> _Candidate | None:
    descent = _descend(segments, level.fields, level.prefix, threshold)
    if descent is None:
        return None
    path, total = descent
    return _Candidate(path=path, score=total / len(segments))


def _descend(
    segments: Sequence[str], siblings: Sequence[Field], prefix: str, threshold: float
) -> tuple[str, float] | None:
    """Return the best-scoring path and its summed score for the remaining segments."""
    segment, remaining = segments[0], segments[1:]
    best: tuple[str, float] | None = None
    for field, score in _matching_siblings(segment, siblings, threshold):
        path = join_path(prefix, field.name)
        if remaining:
            tail = _descend(remaining, field.children, path, threshold)
            if tail is None:
                continue
            path, score = tail[0], score + tail[1]
        if best is None or score > best[1]:
            best = (path, score)
    return best


def _matching_siblings(
    segment: str, siblings: Sequence[Field], threshold: float
) -> list[tuple[Field, float]]:
    # every exact sibling is a candidate; otherwise only the closest fuzzy one
    exact = [(sibling, 1.0) for sibling in siblings if sibling.name == segment]
    if exact:
        return exact

    best: tuple[Field, float] | None = None
    for sibling in siblings:
        score = similarity(segment, sibling.name)
        if score >= threshold and (best is None or score > best[1]):
            best = (sibling, score)
    return [best] if best is not None else []


def _iter_levels(root: Field) -> Iterator[_Level]:
    """Yield every sibling group in depth-first pre-order, root children first."""
    if root.children:
        yield _Level(prefix="", fields=root.children)
    yield from _iter_child_levels(root.children, "")


def _iter_child_levels(children: tuple[Field, ...], prefix: str) -> Iterator[_Level]:
    for child in children:
        path = join_path(prefix, child.name)
        if child.children:
            yield _Level(prefix=path, fields=child.children)
            yield from _iter_child_levels(child.children, path)
