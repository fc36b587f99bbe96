"""Adapter copying the bundled starter project."""

from __future__ import annotations

import logging
import shutil
from importlib import resources
from pathlib import Path

from readme_utils.errors import ScaffoldError

logger = logging.getLogger(__name__)

TEMPLATE_PACKAGE = "readme_utils"
TEMPLATE_DIR_NAME = "template"


class DirectoryTemplateCopier:
    """Copy a template directory tree verbatim.

    Files already present in the target are overwritten; other files in the
    target are left untouched.
    """

    def __init__(self, template_dir: Path) -> None:
        self.template_dir = Path(template_dir)

    def copy(self, target_dir: Path) -> None:
        if not self.template_dir.is_dir():
            raise ScaffoldError(f"Template directory not found: {self.template_dir}")
        logger.debug("Copying %s to %s", self.template_dir, target_dir)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            shutil.copytree(self.template_dir, target_dir, dirs_exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(f"Cannot copy template into {target_dir}: {exc}") from exc


class BundledTemplateCopier:
    """Copy the template shipped inside the ``readme_utils`` package."""

    def copy(self, target_dir: Path) -> None:
        template = resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_DIR_NAME)
        with resources.as_file(template) as template_dir:
            DirectoryTemplateCopier(template_dir).copy(target_dir)
