"""Typed command and parameter objects shared across use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class BuildCommand:
    """Build the project described by the settings file."""


@dataclass(frozen=True)
class InitCommand:
    """Scaffold a starter project.

    ``name`` is the target folder relative to the working directory; ``None``
    scaffolds into the working directory itself.
    """

    name: str | None = None


Command: TypeAlias = BuildCommand | InitCommand


@dataclass(frozen=True)
class ConversionParameters:
    """Converter invocation parameters derived from project settings."""

    executable: str
    input: str
    output: str
    bibliography: str | None = None
    header: str | None = None
