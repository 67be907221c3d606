"""Mapping document loading and field tree construction."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from mapping_inspector.field_model import Field, FieldKind, classify_kind, join_path

_LOGGER = logging.getLogger("mapping_inspector.mapping_parsing")

_PROPERTIES_KEY = "properties"
_TYPE_KEY = "type"
_MULTI_FIELD_TYPE = "multi_field"
_MULTI_FIELD_KEY = "fields"


class MappingError(Exception):
    """Raised when a mapping document cannot be turned into a field tree."""


class MalformedMappingError(MappingError):
    """Raised when a mapping node lacks the structure its kind mandates."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Malformed mapping at '{path}': {reason}")
        self.path = path
        self.reason = reason


def load_mapping_document(text: str) -> Mapping[str, Any]:
    """Decode mapping text into a nested mapping."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MappingError(f"Invalid mapping document: {exc}") from exc
    if not isinstance(document, Mapping):
        raise MappingError("Mapping document root must be an object.")
    return document


def parse_mapping(document: Any, *, drop_unsupported: bool = False) -> Field:
    """Build the field tree for a single-rooted mapping document.

    Args:
      document: Mapping with exactly one top-level key whose value holds a
        ``properties`` mapping.
      drop_unsupported: Leave fields of unsupported kinds out of the tree
        instead of keeping them as opaque leaves.

    Returns:
      The root field, classified as an object.

    Raises:
      MalformedMappingError: If any node lacks the structure its kind needs.
        No partial tree is returned.
    """
    if not isinstance(document, Mapping) or len(document) != 1:
        raise MalformedMappingError("<root>", "document must hold exactly one top-level key")

    ((root_name, root_definition),) = document.items()
    if not isinstance(root_name, str) or not root_name:
        raise MalformedMappingError("<root>", "top-level key must be a non-empty string")
    if not isinstance(root_definition, Mapping):
        raise MalformedMappingError(root_name, "root definition must be a mapping")

    properties = root_definition.get(_PROPERTIES_KEY)
    if not isinstance(properties, Mapping):
        raise MalformedMappingError(root_name, "root must define a properties mapping")

    children = _parse_properties(properties, prefix="", drop_unsupported=drop_unsupported)
    return Field(name=root_name, kind=FieldKind.OBJECT, children=children)


def _parse_properties(
    properties: Mapping[str, Any], *, prefix: str, drop_unsupported: bool
) -> tuple[Field, ...]:
    children: list[Field] = []
    for name, definition in properties.items():
        path = join_path(prefix, str(name))
        child = _parse_field(str(name), definition, path=path, drop_unsupported=drop_unsupported)
        if child is not None:
            children.append(child)
    return tuple(children)


def _parse_field(name: str, definition: Any, *, path: str, drop_unsupported: bool) -> Field | None:
    if not name:
        raise MalformedMappingError(path or "<root>", "field names must not be empty")
    if not isinstance(definition, Mapping):
        raise MalformedMappingError(path, "field definition must be a mapping")

    kind = _classify_definition(name, definition, path=path)
    if kind is FieldKind.UNSUPPORTED:
        _LOGGER.debug(
            "Field '%s' has unsupported type %r; %s",
            path,
            definition.get(_TYPE_KEY),
            "skipping" if drop_unsupported else "keeping as opaque leaf",
        )
        return None if drop_unsupported else Field(name=name, kind=kind)

    if not kind.is_container:
        return Field(name=name, kind=kind)

    properties = definition.get(_PROPERTIES_KEY)
    if properties is None:
        return Field(name=name, kind=kind)
    if not isinstance(properties, Mapping):
        raise MalformedMappingError(path, "properties must be a mapping")
    children = _parse_properties(properties, prefix=path, drop_unsupported=drop_unsupported)
    return Field(name=name, kind=kind, children=children)


def _classify_definition(name: str, definition: Mapping[str, Any], *, path: str) -> FieldKind:
    raw_type = definition.get(_TYPE_KEY)
    if raw_type is None:
        return FieldKind.OBJECT if _PROPERTIES_KEY in definition else FieldKind.UNSUPPORTED
    if raw_type == _MULTI_FIELD_TYPE:
        return classify_kind(_multi_field_default(name, definition, path=path).get(_TYPE_KEY))
    return classify_kind(raw_type)


def _multi_field_default(
    name: str, definition: Mapping[str, Any], *, path: str
) -> Mapping[str, Any]:
    # multi_field keeps its real definition one level down, under its own name
    sub_fields = definition.get(_MULTI_FIELD_KEY)
    if not isinstance(sub_fields, Mapping):
        raise MalformedMappingError(path, "multi_field requires a fields mapping")
    default = sub_fields.get(name)
    if not isinstance(default, Mapping):
        raise MalformedMappingError(path, f"multi_field is missing its default sub-field '{name}'")
    return default
