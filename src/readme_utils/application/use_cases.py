"""Application use-cases orchestrating the build and init workflows."""

from __future__ import annotations

import logging
import os
import shlex
from pathlib import Path

from readme_utils.adapters.runners import SubprocessCommandRunner
from readme_utils.adapters.settings import (
    JsonSettingsLoader,
    read_settings_payload,
    settings_path_for,
    write_settings_payload,
)
from readme_utils.adapters.templates import BundledTemplateCopier
from readme_utils.application.options import ConversionParameters
from readme_utils.application.ports import CommandRunner, SettingsLoader, TemplateCopier
from readme_utils.application.results import (
    BuildResult,
    ExecutionFailure,
    InitResult,
    PreparedBuild,
)
from readme_utils.errors import (
    ConverterExitError,
    ConverterLaunchError,
    EmptySourceError,
    InputError,
)
from readme_utils.schemas import ProjectSettings

logger = logging.getLogger(__name__)


def resolve_source_dir(settings: ProjectSettings, cwd: Path) -> Path:
    """Resolve the configured source directory against ``cwd``."""
    return (Path(cwd) / settings.source_dir_or_default).resolve()


def collect_input_files(source_dir: Path) -> list[Path]:
    """Return every non-directory entry below ``source_dir``, sorted by path.

    Raises
    ------
    InputError
        If ``source_dir`` is not a directory.
    EmptySourceError
        If no file is found.
    """
    if not source_dir.is_dir():
        raise InputError(f"Source directory {source_dir} does not exist.")
    files = sorted(
        (path for path in source_dir.rglob("*") if not path.is_dir()),
        key=lambda path: path.as_posix(),
    )
    if not files:
        raise EmptySourceError(source_dir)
    return files


def build_parameters(settings: ProjectSettings, cwd: Path) -> ConversionParameters:
    """Derive converter parameters from project settings.

    Parameters
    ----------
    settings : ProjectSettings
        Validated project settings.
    cwd : Path
        Working directory; input paths are rendered relative to it.

    Returns
    -------
    ConversionParameters
        Parameters ready to be rendered into a command line.

    Notes
    -----
    - Metadata, bibliography and header paths are not checked for existence;
      the converter reports missing files itself.
    """
    logger.debug("Creating pandoc parameters...")
    cwd = Path(cwd).resolve()
    source_dir = resolve_source_dir(settings, cwd)
    logger.debug("Source directory: %s", source_dir)
    input_files = collect_input_files(source_dir)

    inputs = [shlex.quote(os.path.relpath(path, cwd)) for path in input_files]
    if settings.metadata:
        inputs.insert(0, shlex.quote(settings.metadata))

    bibliography = header = None
    if settings.bib:
        bibliography = shlex.quote(f"--bibliography={settings.bib}")
    if settings.header:
        header = shlex.quote(f"--include-in-header={settings.header}")

    return ConversionParameters(
        executable=settings.executable,
        input=" ".join(inputs),
        output=shlex.quote(f"--output={settings.output}"),
        bibliography=bibliography,
        header=header,
    )


def render_command(parameters: ConversionParameters) -> str:
    """Render converter parameters as a single command line."""
    options = []
    if parameters.bibliography:
        options.append(parameters.bibliography)
    if parameters.header:
        options.append(parameters.header)
    options.append(parameters.input)
    options.append(parameters.output)
    return f"{parameters.executable} {' '.join(options)}"


def prepare_build(
    *,
    cwd: Path,
    settings_loader: SettingsLoader | None = None,
) -> PreparedBuild:
    """Use-case: load settings and render the converter command.

    Raises
    ------
    ConfigurationError
        If the settings file is missing or invalid.
    InputError
        If the source directory holds no files.
    """
    settings_loader = settings_loader or JsonSettingsLoader()
    logger.debug("Reading settings...")
    settings = settings_loader.load(cwd)
    parameters = build_parameters(settings, cwd)
    return PreparedBuild(
        command=render_command(parameters),
        executable=parameters.executable,
    )


def execute_build(
    prepared: PreparedBuild,
    *,
    cwd: Path,
    runner: CommandRunner | None = None,
) -> BuildResult:
    """Use-case: run a prepared converter command and check its status.

    Raises
    ------
    ConverterLaunchError
        If the converter could not be started.
    ConverterExitError
        If the converter exited with a non-zero status.
    """
    runner = runner or SubprocessCommandRunner()
    logger.debug("Running build command: %s", prepared.command)
    outcome = runner.run(prepared.command, cwd)
    if isinstance(outcome, ExecutionFailure):
        raise ConverterLaunchError(outcome.reason)
    if not outcome.succeeded:
        raise ConverterExitError(
            executable=prepared.executable,
            exit_code=outcome.exit_code,
            stderr=outcome.stderr.strip(),
        )
    return BuildResult(command=prepared.command, execution=outcome)


def build_project(
    *,
    cwd: Path,
    settings_loader: SettingsLoader | None = None,
    runner: CommandRunner | None = None,
) -> BuildResult:
    """Use-case: load settings, render the converter command and run it."""
    prepared = prepare_build(cwd=cwd, settings_loader=settings_loader)
    return execute_build(prepared, cwd=cwd, runner=runner)


def init_project(
    *,
    cwd: Path,
    name: str | None = None,
    copier: TemplateCopier | None = None,
) -> InitResult:
    """Use-case: scaffold a starter project and stamp its name.

    Parameters
    ----------
    cwd : Path
        Working directory.
    name : str | None, default=None
        Target folder relative to ``cwd``; ``None`` scaffolds into ``cwd``.
    copier : TemplateCopier | None, default=None
        Template copier; defaults to the bundled template.
    """
    copier = copier or BundledTemplateCopier()
    project_dir = (Path(cwd) / name).resolve() if name else Path(cwd).resolve()
    logger.debug("Attempting to create project inside the %s folder", project_dir)

    copier.copy(project_dir)

    settings_path = settings_path_for(project_dir)
    payload = read_settings_payload(settings_path)
    payload["project"] = project_dir.name
    write_settings_payload(settings_path, payload)
    return InitResult(
        project_dir=project_dir,
        settings_path=settings_path,
        project=project_dir.name,
    )
