"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from readme_utils.application.options import (
    BuildCommand,
    Command,
    ConversionParameters,
    InitCommand,
)
from readme_utils.application.ports import CommandRunner, SettingsLoader, TemplateCopier
from readme_utils.application.results import (
    BuildResult,
    ExecutionFailure,
    ExecutionOutcome,
    ExecutionResult,
    InitResult,
    PreparedBuild,
)


def build_project(
    *,
    cwd: Path,
    settings_loader: SettingsLoader | None = None,
    runner: CommandRunner | None = None,
) -> BuildResult:
    """Build the project in ``cwd`` via lazy use-case import."""
    from readme_utils.application.use_cases import build_project as _impl

    return _impl(cwd=cwd, settings_loader=settings_loader, runner=runner)


def init_project(
    *,
    cwd: Path,
    name: str | None = None,
    copier: TemplateCopier | None = None,
) -> InitResult:
    """Scaffold a starter project via lazy use-case import."""
    from readme_utils.application.use_cases import init_project as _impl

    return _impl(cwd=cwd, name=name, copier=copier)


__all__ = [
    "BuildCommand",
    "BuildResult",
    "Command",
    "ConversionParameters",
    "ExecutionFailure",
    "ExecutionOutcome",
    "ExecutionResult",
    "InitCommand",
    "InitResult",
    "PreparedBuild",
    "build_project",
    "init_project",
]
