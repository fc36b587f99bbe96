"""Settings file adapters."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from readme_utils.errors import ConfigurationError, SettingsNotFoundError
from readme_utils.schemas import ProjectSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "readme-settings.json"


def settings_path_for(directory: Path) -> Path:
    """Return the settings file location inside ``directory``."""
    return Path(directory).resolve() / SETTINGS_FILE_NAME


def read_settings_payload(path: Path) -> dict[str, Any]:
    """Read the raw JSON object stored in a settings file.

    Parameters
    ----------
    path : Path
        Settings file to read.

    Returns
    -------
    dict[str, Any]
        Decoded JSON object, unknown keys included.

    Raises
    ------
    SettingsNotFoundError
        If ``path`` does not exist.
    ConfigurationError
        If the file is not valid JSON or does not hold a JSON object.
    """
    if not path.is_file():
        raise SettingsNotFoundError(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in settings file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object.")
    return payload


def write_settings_payload(path: Path, payload: dict[str, Any]) -> None:
    """Write a settings object back to disk as indented JSON."""
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


class JsonSettingsLoader:
    """Default settings loader reading ``readme-settings.json``."""

    def load(self, cwd: Path) -> ProjectSettings:
        """Load and validate the settings file of a working directory.

        Parameters
        ----------
        cwd : Path
            Working directory holding the settings file.

        Returns
        -------
        ProjectSettings
            Immutable, validated settings.
        """
        path = settings_path_for(cwd)
        logger.debug("Reading settings from %s", path)
        payload = read_settings_payload(path)
        try:
            return ProjectSettings.model_validate(payload)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings file {path}: {exc}") from exc
