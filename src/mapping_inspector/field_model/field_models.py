"""Field tree entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Closed set of field type classifications."""

    STRING = "string"
    TEXT = "text"
    KEYWORD = "keyword"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    HALF_FLOAT = "half_float"
    SCALED_FLOAT = "scaled_float"
    DATE = "date"
    BOOLEAN = "boolean"
    BINARY = "binary"
    IP = "ip"
    TOKEN_COUNT = "token_count"
    COMPLETION = "completion"
    GEO_POINT = "geo_point"
    OBJECT = "object"
    NESTED = "nested"
    UNSUPPORTED = "unsupported"

    @property
    def is_container(self) -> bool:
        """Return True for kinds that carry child fields."""
        return self in (FieldKind.OBJECT, FieldKind.NESTED)


_KINDS_BY_INDICATOR: dict[str, FieldKind] = {
    kind.value: kind for kind in FieldKind if kind is not FieldKind.UNSUPPORTED
}


def classify_kind(raw: object) -> FieldKind:
    """Map a raw kind indicator to a FieldKind, falling back to UNSUPPORTED."""
    if not isinstance(raw, str):
        return FieldKind.UNSUPPORTED
    return _KINDS_BY_INDICATOR.get(raw, FieldKind.UNSUPPORTED)


@dataclass(frozen=True)
class Field:
    """One node of a mapping tree."""

    name: str
    kind: FieldKind
    children: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Field name must be a non-empty string.")
        if self.kind is FieldKind.UNSUPPORTED and self.children:
            raise ValueError(f"Unsupported field '{self.name}' cannot carry children.")

    @property
    def is_leaf(self) -> bool:
        """Return True when the field has no children."""
        return not self.children

    def __str__(self) -> str:
        if not self.children:
            return f"{self.name}={self.kind.value}"
        inner = ", ".join(str(child) for child in self.children)
        return f"{self.name}={self.kind.value}[{inner}]"
