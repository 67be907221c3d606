"""Path derivation over field trees.

Full paths are never stored on a Field. They are rebuilt by carrying the
accumulated prefix down a traversal, so a filtered copy of a tree can never
hold a stale path. Paths are relative to the root: the root itself has the
empty path and its direct children are addressed by their bare names.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .field_models import Field, FieldKind

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class FieldPath:
    """A field paired with the names leading to it from the root."""

    segments: tuple[str, ...]
    field: Field

    @property
    def path(self) -> str:
        return PATH_SEPARATOR.join(self.segments)

    @property
    def depth(self) -> int:
        return len(self.segments)


def join_path(prefix: str, name: str) -> str:
    """Append one name to a dotted prefix."""
    return name if not prefix else f"{prefix}{PATH_SEPARATOR}{name}"


def iter_field_paths(root: Field) -> Iterator[FieldPath]:
    """Yield every non-root field in depth-first pre-order."""
    yield from _walk(root.children, ())


def _walk(children: tuple[Field, ...], prefix: tuple[str, ...]) -> Iterator[FieldPath]:
    for child in children:
        segments = (*prefix, child.name)
        yield FieldPath(segments=segments, field=child)
        yield from _walk(child.children, segments)


def field_lookup(root: Field) -> dict[str, FieldKind]:
    """Return an ordered path-to-kind lookup; the first duplicate path wins."""
    lookup: dict[str, FieldKind] = {}
    for entry in iter_field_paths(root):
        lookup.setdefault(entry.path, entry.field.kind)
    return lookup


def resolve_field(root: Field, path: str) -> Field | None:
    """Return the first field in pre-order found at a dotted path, or None.

    Same-named siblings are all tried, so a leaf sharing its name with a
    container does not hide the container's descendants.
    """
    if not path:
        return root
    return _resolve(root.children, path.split(PATH_SEPARATOR))


def _resolve(children: tuple[Field, ...], segments: list[str]) -> Field | None:
    segment, remaining = segments[0], segments[1:]
    for child in children:
        if child.name != segment:
            continue
        if not remaining:
            return child
        found = _resolve(child.children, remaining)
        if found is not None:
            return found
    return None
