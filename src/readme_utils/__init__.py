"""Top-level API for building pandoc documentation projects."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from readme_utils.schemas import ProjectSettings

__version__ = "0.1.0"


def load_settings(cwd: Optional[Path] = None) -> ProjectSettings:
    """Load and validate the settings file of a project.

    Parameters
    ----------
    cwd : Path, optional
        Project directory; defaults to the current working directory.

    Returns
    -------
    ProjectSettings
        Validated settings.
    """
    from .api import load_settings as _impl

    return _impl(cwd)


def render_command(settings: ProjectSettings, cwd: Optional[Path] = None) -> str:
    """Render the converter command for ``settings`` without running it.

    Parameters
    ----------
    settings : ProjectSettings
        Validated settings.
    cwd : Path, optional
        Project directory used to discover and relativize input files.

    Returns
    -------
    str
        Command line, e.g. ``pandoc src/a.md --output=out.pdf``.
    """
    from .api import render_command as _impl

    return _impl(settings, cwd)


def build_project(cwd: Optional[Path] = None) -> str:
    """Build a project with the configured converter.

    Parameters
    ----------
    cwd : Path, optional
        Project directory; defaults to the current working directory.

    Returns
    -------
    str
        Standard output of the converter.
    """
    from .api import build_project as _impl

    return _impl(cwd)


def init_project(name: Optional[str] = None, cwd: Optional[Path] = None) -> Path:
    """Scaffold a starter project from the bundled template.

    Parameters
    ----------
    name : str, optional
        Folder to create below ``cwd``; defaults to ``cwd`` itself.
    cwd : Path, optional
        Working directory; defaults to the current working directory.

    Returns
    -------
    Path
        Directory of the new project.
    """
    from .api import init_project as _impl

    return _impl(name, cwd)


__all__ = [
    "ProjectSettings",
    "__version__",
    "build_project",
    "init_project",
    "load_settings",
    "render_command",
]
