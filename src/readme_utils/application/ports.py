"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from readme_utils.application.results import ExecutionOutcome
from readme_utils.schemas import ProjectSettings


class SettingsLoader(Protocol):
    """Load project settings for a working directory."""

    def load(self, cwd: Path) -> ProjectSettings:
        """Return validated settings or raise ``ConfigurationError``."""


class CommandRunner(Protocol):
    """Execute a rendered command line."""

    def run(self, command: str, cwd: Path) -> ExecutionOutcome:
        """Run ``command`` inside ``cwd`` and wait for it to finish."""


class TemplateCopier(Protocol):
    """Copy the starter project tree into a target directory."""

    def copy(self, target_dir: Path) -> None:
        """Copy template files into ``target_dir``, creating it if needed."""
