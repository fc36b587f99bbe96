"""Exception hierarchy shared by the CLI, use-cases and adapters."""

from __future__ import annotations

from pathlib import Path


class ReadmeUtilsError(Exception):
    """Base error for readme-utils failures."""

    exit_code: int = 1


class ConfigurationError(ReadmeUtilsError):
    """Raised when the project settings cannot be loaded or are invalid."""


class SettingsNotFoundError(ConfigurationError):
    """Raised when the settings file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Missing settings file {path}.")
        self.path = path


class InputError(ReadmeUtilsError):
    """Raised when the source directory cannot provide any input files."""


class EmptySourceError(InputError):
    """Raised when the source directory contains no files."""

    def __init__(self, source_dir: Path) -> None:
        super().__init__(f"Empty source directory {source_dir}.")
        self.source_dir = source_dir


class ScaffoldError(ReadmeUtilsError):
    """Raised when a starter project cannot be created."""


class ExecutionError(ReadmeUtilsError):
    """Base error for converter execution failures."""


class ConverterExitError(ExecutionError):
    """Raised when the converter exits with a non-zero status.

    Parameters
    ----------
    executable : str
        Converter executable as written in the command line.
    exit_code : int
        Exit status reported by the child process.
    stderr : str
        Captured standard error, already trimmed.
    """

    def __init__(self, executable: str, exit_code: int, stderr: str) -> None:
        super().__init__(stderr or f"{executable} exited with status {exit_code}.")
        self.executable = executable
        self.exit_code = exit_code
        self.stderr = stderr

    @property
    def code(self) -> str:
        """Exit status rendered as a string tag."""
        return str(self.exit_code)


class ConverterLaunchError(ExecutionError):
    """Raised when the converter process could not be started at all."""

    exit_code = 127
