"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True)
class ExecutionResult:
    """Completed child process."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class ExecutionFailure:
    """Child process that could not be started."""

    command: str
    reason: str


ExecutionOutcome: TypeAlias = ExecutionResult | ExecutionFailure


@dataclass(frozen=True)
class BuildResult:
    """Structured build outcome."""

    command: str
    execution: ExecutionResult


@dataclass(frozen=True)
class InitResult:
    """Structured scaffolding outcome."""

    project_dir: Path
    settings_path: Path
    project: str


@dataclass(frozen=True)
class PreparedBuild:
    """Rendered converter command, ready to run."""

    command: str
    executable: str
