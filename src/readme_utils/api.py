"""Public path-based API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from readme_utils.adapters.settings import JsonSettingsLoader
from readme_utils.application.use_cases import build_parameters
from readme_utils.application.use_cases import build_project as _build_project
from readme_utils.application.use_cases import init_project as _init_project
from readme_utils.application.use_cases import render_command as _render_command
from readme_utils.schemas import ProjectSettings


def load_settings(cwd: Optional[Path] = None) -> ProjectSettings:
    """Load ``readme-settings.json`` from ``cwd`` (default: current directory)."""
    return JsonSettingsLoader().load(Path(cwd or Path.cwd()))


def render_command(settings: ProjectSettings, cwd: Optional[Path] = None) -> str:
    """Return the converter command line the build would run."""
    return _render_command(build_parameters(settings, Path(cwd or Path.cwd())))


def build_project(cwd: Optional[Path] = None) -> str:
    """Build the project in ``cwd`` and return the converter's stdout."""
    result = _build_project(cwd=Path(cwd or Path.cwd()))
    return result.execution.stdout


def init_project(name: Optional[str] = None, cwd: Optional[Path] = None) -> Path:
    """Scaffold a starter project and return its directory."""
    result = _init_project(cwd=Path(cwd or Path.cwd()), name=name)
    return result.project_dir
