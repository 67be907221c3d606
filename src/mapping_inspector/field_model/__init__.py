"""Field tree model exports."""

from .field_models import Field, FieldKind, classify_kind
from .field_paths import FieldPath, field_lookup, iter_field_paths, join_path, resolve_field

__all__ = [
    "Field",
    "FieldKind",
    "FieldPath",
    "classify_kind",
    "field_lookup",
    "iter_field_paths",
    "join_path",
    "resolve_field",
]
