"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import TypeAlias

import pytest

ProjectFactory: TypeAlias = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Create a project folder holding a settings file and source files."""

    def _make(
        settings: Mapping[str, object] | None = None,
        files: Sequence[str] = ("src/a.md", "src/b.md"),
    ) -> Path:
        root = tmp_path.resolve()
        payload = {"project": "p", "output": "out.pdf"}
        payload.update(settings or {})
        (root / "readme-settings.json").write_text(json.dumps(payload), encoding="utf-8")
        for rel in files:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"# {path.stem}\n", encoding="utf-8")
        return root

    return _make
