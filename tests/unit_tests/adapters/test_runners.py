"""Unit tests for the subprocess command runner."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from readme_utils.adapters import runners as runners_module
from readme_utils.adapters.runners import SubprocessCommandRunner
from readme_utils.application.results import ExecutionFailure, ExecutionResult


def test_run_splits_command_and_captures_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Split the command line and forward cwd to ``subprocess.run``."""
    called: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        called["argv"] = argv
        called["kwargs"] = kwargs
        return subprocess.CompletedProcess(argv, 0, stdout="ok\n", stderr="")

    monkeypatch.setattr(runners_module.subprocess, "run", fake_run)

    outcome = SubprocessCommandRunner().run(
        "pandoc '--output=final book.pdf' src/a.md", tmp_path
    )

    assert outcome == ExecutionResult(exit_code=0, stdout="ok\n", stderr="")
    assert called["argv"] == ["pandoc", "--output=final book.pdf", "src/a.md"]
    assert called["kwargs"] == {
        "cwd": tmp_path,
        "capture_output": True,
        "text": True,
        "encoding": "utf-8",
        "errors": "replace",
        "check": False,
    }


def test_run_returns_non_zero_exit_as_result(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Report a non-zero exit as a completed result, not a failure."""

    def fake_run(argv: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(argv, 43, stdout="", stderr="boom")

    monkeypatch.setattr(runners_module.subprocess, "run", fake_run)

    outcome = SubprocessCommandRunner().run("pandoc a.md", tmp_path)

    assert isinstance(outcome, ExecutionResult)
    assert outcome.exit_code == 43
    assert not outcome.succeeded


def test_run_reports_missing_executable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Turn ``FileNotFoundError`` into an execution failure."""

    def fake_run(argv: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    monkeypatch.setattr(runners_module.subprocess, "run", fake_run)

    outcome = SubprocessCommandRunner().run("no-such-pandoc a.md", tmp_path)

    assert outcome == ExecutionFailure(
        command="no-such-pandoc a.md", reason="Executable not found: no-such-pandoc"
    )


def test_run_reports_permission_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Turn other ``OSError`` launch problems into an execution failure."""

    def fake_run(argv: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        raise PermissionError(13, "Permission denied", argv[0])

    monkeypatch.setattr(runners_module.subprocess, "run", fake_run)

    outcome = SubprocessCommandRunner().run("./pandoc a.md", tmp_path)

    assert isinstance(outcome, ExecutionFailure)
    assert outcome.reason == "Cannot start ./pandoc: Permission denied"


@pytest.mark.parametrize("command", ["", "pandoc 'unterminated"])
def test_run_rejects_unparseable_command(tmp_path: Path, command: str) -> None:
    """Fail without spawning anything when the command cannot be split."""
    outcome = SubprocessCommandRunner().run(command, tmp_path)

    assert isinstance(outcome, ExecutionFailure)


def test_run_passes_shell_syntax_literally(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Leave ``~`` and ``$VAR`` unexpanded since no shell is involved."""
    called: dict[str, object] = {}

    def fake_run(argv: list[str], **_: object) -> subprocess.CompletedProcess[str]:
        called["argv"] = argv
        return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")

    monkeypatch.setattr(runners_module.subprocess, "run", fake_run)

    SubprocessCommandRunner().run("pandoc '~/meta.yaml' '--bibliography=$HOME/refs.bib'", tmp_path)

    assert called["argv"] == ["pandoc", "~/meta.yaml", "--bibliography=$HOME/refs.bib"]
