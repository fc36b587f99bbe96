#!/usr/bin/env python3
"""
readme_utils.cli.cli

Typer-based CLI that builds a documentation project with pandoc, driven by
the project's ``readme-settings.json``.

Examples
--------
Scaffold a starter project:

    readme-utils --init --name my-docs

Build the project in the current directory:

    cd my-docs && readme-utils
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from readme_utils import __version__
from readme_utils.application.options import BuildCommand, Command, InitCommand
from readme_utils.errors import ConverterExitError, ReadmeUtilsError

app = typer.Typer(
    name="readme-utils",
    help="A thin wrapper that enables external configuration for the pandoc command.",
    add_completion=False,
)

BUILD_HELP = "If the project should be built."
INIT_HELP = "Generate starter project."
NAME_HELP = "Project name and folder, defaults to the current working directory."


# -----------------------------
# Utilities
# -----------------------------
def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised by a use-case.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    label = type(exc).__name__
    if isinstance(exc, ConverterExitError):
        label = f"{label} (code {exc.code})"
    typer.secho(f"✗ {label}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code < 0:
        # Killed by signal N: exit with 128 + N, as a shell does.
        return 128 - code
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def resolve_command(
    *,
    init: bool,
    name: str | None,
    build_requested: bool,
) -> Command:
    """Resolve CLI flags into a single command.

    Parameters
    ----------
    init : bool
        Whether ``--init`` was passed.
    name : str | None
        Value of ``--name``.
    build_requested : bool
        Whether ``--build`` was passed explicitly (it is on by default).

    Raises
    ------
    typer.BadParameter
        If the flags combine in an unsupported way.
    """
    if name is not None and not init:
        raise typer.BadParameter("--name requires --init.")
    if init and build_requested:
        raise typer.BadParameter("--init cannot be used with --build.")
    if init:
        return InitCommand(name=name)
    return BuildCommand()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"readme-utils {__version__}")
        raise typer.Exit()


# -----------------------------
# Flows
# -----------------------------
def _run_init(command: InitCommand, cwd: Path, debug: bool) -> None:
    from readme_utils.application.use_cases import init_project

    try:
        result = init_project(cwd=cwd, name=command.name)
    except ReadmeUtilsError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    typer.secho(f"✓ Created project '{result.project}' in {result.project_dir}", fg=typer.colors.GREEN)


def _run_build(cwd: Path, debug: bool) -> None:
    from readme_utils.application.use_cases import execute_build, prepare_build

    try:
        prepared = prepare_build(cwd=cwd)
        typer.echo(f"Running build command:\n> {prepared.command}")
        result = execute_build(prepared, cwd=cwd)
    except ConverterExitError as exc:
        typer.secho(
            f"Warning: Received non-zero ({exc.code}) exit status from {exc.executable}.",
            fg=typer.colors.YELLOW,
            err=True,
        )
        raise typer.Exit(code=_print_error(exc, debug))
    except ReadmeUtilsError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))
    if result.execution.stdout:
        typer.echo(result.execution.stdout)


# -----------------------------
# Command
# -----------------------------
@app.command()
def main(
    ctx: typer.Context,
    build: bool = typer.Option(True, "--build", "-b", help=BUILD_HELP),
    init: bool = typer.Option(False, "--init", "-i", help=INIT_HELP),
    name: str | None = typer.Option(None, "--name", "-n", help=NAME_HELP),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        "-C",
        exists=True,
        file_okay=False,
        help="Working directory, defaults to the current directory.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Build the project with pandoc as described by readme-settings.json, or scaffold a new one.

    Parameters
    ----------
    ctx : typer.Context
        Typer context, used to tell an explicit ``--build`` from its default.
    build : bool, default=True
        Run the build flow.
    init : bool, default=False
        Run the init flow instead.
    name : str | None, default=None
        Project folder created by ``--init``.
    cwd : Path | None, default=None
        Working directory threaded into every step.
    debug : bool, default=False
        Whether to enable debug logging and tracebacks.
    """
    del build, version
    _configure_logging(debug)
    # The ParameterSource enum may come from typer's vendored click.
    source = ctx.get_parameter_source("build")
    build_requested = source is not None and source.name == "COMMANDLINE"
    command = resolve_command(init=init, name=name, build_requested=build_requested)
    workdir = (cwd or Path.cwd()).resolve()

    if isinstance(command, InitCommand):
        _run_init(command, workdir, debug)
    else:
        _run_build(workdir, debug)


if __name__ == "__main__":
    app()
