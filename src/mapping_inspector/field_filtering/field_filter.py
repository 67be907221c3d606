"""Include/exclude filtering of field trees."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from mapping_inspector.field_model import Field, join_path
from mapping_inspector.field_model.field_paths import PATH_SEPARATOR

_WILDCARD = "*"


class InvalidPatternError(Exception):
    """Raised when an include or exclude pattern cannot be compiled."""

    def __init__(self, pattern: object, reason: str) -> None:
        super().__init__(f"Invalid field pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass(frozen=True)
class FieldPattern:
    """A compiled glob matched against whole dotted paths."""

    raw: str
    regex: re.Pattern[str]

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


def compile_pattern(pattern: object) -> FieldPattern:
    """Compile one glob where ``*`` matches any run of characters, dots included."""
    if not isinstance(pattern, str):
        raise InvalidPatternError(pattern, "pattern must be a string")
    if not pattern.strip():
        raise InvalidPatternError(pattern, "pattern must not be blank")
    if any(not segment for segment in pattern.split(PATH_SEPARATOR)):
        raise InvalidPatternError(pattern, "pattern contains an empty path segment")

    expression = ".*".join(re.escape(part) for part in pattern.split(_WILDCARD))
    return FieldPattern(raw=pattern, regex=re.compile(expression, re.DOTALL))


def compile_patterns(patterns: Iterable[object]) -> tuple[FieldPattern, ...]:
    """Compile patterns in order, dropping duplicates."""
    compiled: dict[str, FieldPattern] = {}
    for pattern in patterns:
        field_pattern = compile_pattern(pattern)
        compiled.setdefault(field_pattern.raw, field_pattern)
    return tuple(compiled.values())


def filter_fields(
    root: Field,
    includes: Iterable[str] = (),
    excludes: Iterable[str] = (),
) -> Field:
    """Return a new tree keeping the branches selected by the patterns.

    A node matching an exclude pattern is dropped with its subtree, even when
    an include pattern matches it too. A node matching an include pattern is
    kept with its subtree. A node matching neither is kept only as the parent
    of surviving descendants. An empty include set selects everything. The
    root is always kept; no node of the input is reused.
    """
    include_patterns = compile_patterns(includes)
    exclude_patterns = compile_patterns(excludes)
    children = _filter_children(
        root.children,
        prefix="",
        includes=include_patterns,
        excludes=exclude_patterns,
    )
    return Field(name=root.name, kind=root.kind, children=children)


def _filter_children(
    children: tuple[Field, ...],
    *,
    prefix: str,
    includes: tuple[FieldPattern, ...],
    excludes: tuple[FieldPattern, ...],
) -> tuple[Field, ...]:
    kept: list[Field] = []
    for child in children:
        path = join_path(prefix, child.name)
        if _matches_any(excludes, path):
            continue

        if not includes or _matches_any(includes, path):
            # selected: keep the whole subtree, still honouring excludes
            grandchildren = _filter_children(
                child.children, prefix=path, includes=(), excludes=excludes
            )
            kept.append(Field(name=child.name, kind=child.kind, children=grandchildren))
            continue

        grandchildren = _filter_children(
            child.children, prefix=path, includes=includes, excludes=excludes
        )
        if grandchildren:
            kept.append(Field(name=child.name, kind=child.kind, children=grandchildren))
    return tuple(kept)


def _matches_any(patterns: tuple[FieldPattern, ...], path: str) -> bool:
    return any(pattern.matches(path) for pattern in patterns)
