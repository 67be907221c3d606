"""End-to-end scenarios from mapping text to typo reports and filtered trees."""

from __future__ import annotations

from pathlib import Path

from mapping_inspector.field_filtering import filter_fields
from mapping_inspector.field_model import Field, FieldKind, iter_field_paths
from mapping_inspector.mapping_parsing import load_mapping_document, parse_mapping
from mapping_inspector.typo_detection import find_typos


def _sample(name: str) -> Field:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / name
    return parse_mapping(load_mapping_document(sample_path.read_text(encoding="utf-8")))


def test_company_mapping_parses_nested_employees() -> None:
    root = _sample("nested-mapping.json")

    assert [child.name for child in root.children] == ["name", "description", "employees"]
    employees = root.children[2]
    assert employees.kind is FieldKind.NESTED
    assert len(employees.children) == 2


def test_restaurant_location_is_single_geo_point() -> None:
    root = _sample("geo.json")

    assert [(child.name, child.kind) for child in root.children] == [
        ("location", FieldKind.GEO_POINT)
    ]


def test_typo_report_and_filter_share_one_tree() -> None:
    root = _sample("multi_level_field_with_same_name.json")
    snapshot = list(iter_field_paths(root))

    report = find_typos(["link.url", "_uid", "name"], root)
    filtered = filter_fields(root, {"*a*e"})

    assert report is not None
    assert report.as_mapping() == {"link.url": "links.url"}
    assert [child.name for child in filtered.children] == ["date", "name"]
    assert list(iter_field_paths(root)) == snapshot


def test_suggestions_point_at_real_paths_of_the_filtered_tree() -> None:
    root = filter_fields(_sample("nested-mapping.json"), {"employees.*"})
    real_paths = {entry.path for entry in iter_field_paths(root)}

    report = find_typos(["employes.nme", "employees.agr", "descripton"], root)

    assert report is not None
    assert report.as_mapping() == {
        "employes.nme": "employees.name",
        "employees.agr": "employees.age",
    }
    assert set(report.suggestions) <= real_paths
