#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/readme_utils"

CLI_IMPORTS = ["import typer", "from typer", "import click", "from click"]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main(package: Path = PACKAGE) -> None:
    """Run repository architecture boundary checks."""
    for layer in ("application", "adapters"):
        for path in (package / layer).glob("*.py"):
            _assert_no_imports(path, [*CLI_IMPORTS, "readme_utils.cli"])

    for name in ("schemas.py", "errors.py"):
        _assert_no_imports(
            package / name,
            ["import subprocess", "readme_utils.adapters", "readme_utils.application"],
        )

    # Ports and results must stay free of concrete adapters.
    for name in ("ports.py", "results.py", "options.py"):
        _assert_no_imports(package / "application" / name, ["readme_utils.adapters"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
