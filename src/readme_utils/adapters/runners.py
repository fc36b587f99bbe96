"""Subprocess adapter running the rendered converter command."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from readme_utils.application.results import (
    ExecutionFailure,
    ExecutionOutcome,
    ExecutionResult,
)

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Run commands with :func:`subprocess.run` and capture their output."""

    def run(self, command: str, cwd: Path) -> ExecutionOutcome:
        """Run a command line and wait for it to exit.

        Parameters
        ----------
        command : str
            Rendered command line. It is split with :func:`shlex.split` and
            executed without a shell.
        cwd : Path
            Directory the child process runs in.

        Returns
        -------
        ExecutionOutcome
            ``ExecutionResult`` once the child exits (whatever its status), or
            ``ExecutionFailure`` when it could not be started.
        """
        try:
            argv = shlex.split(command)
        except ValueError as exc:
            return ExecutionFailure(command=command, reason=f"Cannot parse command: {exc}")
        if not argv:
            return ExecutionFailure(command=command, reason="Empty command.")

        logger.debug("Executing %s in %s", argv, cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            return ExecutionFailure(
                command=command, reason=f"Executable not found: {argv[0]}"
            )
        except OSError as exc:
            return ExecutionFailure(
                command=command, reason=f"Cannot start {argv[0]}: {exc.strerror or exc}"
            )

        logger.debug("%s exited with status %s", argv[0], completed.returncode)
        return ExecutionResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
