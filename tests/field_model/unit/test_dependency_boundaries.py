"""Boundary tests keeping the analysis core free of outer-layer libraries."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_core_modules_do_not_import_outer_layer_libraries() -> None:
    package_dir = _project_root() / "src" / "mapping_inspector"
    core_packages = (
        "field_model",
        "mapping_parsing",
        "typo_detection",
        "field_filtering",
        "field_validation",
    )
    forbidden_import_fragments = (
        "import click",
        "import yaml",
        "import openpyxl",
        "from openpyxl",
        "mapping_inspector.configuration",
        "mapping_inspector.inventory_export",
        "mapping_inspector.cli",
    )

    for package in core_packages:
        for module_path in sorted((package_dir / package).glob("*.py")):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, (
                    f"Forbidden core dependency in {module_path}: {fragment}"
                )
