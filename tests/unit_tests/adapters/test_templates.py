"""Unit tests for template copier adapters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from readme_utils.adapters.templates import BundledTemplateCopier, DirectoryTemplateCopier
from readme_utils.errors import ScaffoldError


def test_directory_copier_merges_into_existing_target(tmp_path: Path) -> None:
    """Copy the tree, overwrite clashing files and keep unrelated ones."""
    template = tmp_path / "template"
    (template / "src").mkdir(parents=True)
    (template / "src" / "intro.md").write_text("template", encoding="utf-8")
    (template / "notes.txt").write_text("template", encoding="utf-8")
    target = tmp_path / "target"
    target.mkdir()
    (target / "notes.txt").write_text("mine", encoding="utf-8")
    (target / "keep.txt").write_text("mine", encoding="utf-8")

    DirectoryTemplateCopier(template).copy(target)

    assert (target / "src" / "intro.md").read_text(encoding="utf-8") == "template"
    assert (target / "notes.txt").read_text(encoding="utf-8") == "template"
    assert (target / "keep.txt").read_text(encoding="utf-8") == "mine"


def test_directory_copier_creates_missing_parents(tmp_path: Path) -> None:
    """Create the target directory and its parents."""
    template = tmp_path / "template"
    template.mkdir()
    (template / "a.txt").write_text("a", encoding="utf-8")

    DirectoryTemplateCopier(template).copy(tmp_path / "x" / "y")

    assert (tmp_path / "x" / "y" / "a.txt").is_file()


def test_directory_copier_requires_template(tmp_path: Path) -> None:
    """Raise a scaffold error when the template directory is missing."""
    with pytest.raises(ScaffoldError, match="Template directory not found"):
        DirectoryTemplateCopier(tmp_path / "missing").copy(tmp_path / "out")


def test_bundled_template_ships_settings_and_sources(tmp_path: Path) -> None:
    """Copy the packaged template, including settings and source chapters."""
    BundledTemplateCopier().copy(tmp_path)

    settings = json.loads((tmp_path / "readme-settings.json").read_text(encoding="utf-8"))
    assert {"project", "output"} <= settings.keys()
    assert sorted(p.name for p in (tmp_path / "src").iterdir()) == [
        "01-introduction.md",
        "02-usage.md",
    ]
