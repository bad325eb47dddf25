"""Install target folder for built extensions."""

from __future__ import annotations

import logging
from pathlib import Path

from rmxbuild.config import Config
from rmxbuild.errors import InvalidInstallPathError

logger = logging.getLogger(__name__)

__all__ = ["default_install_folder", "resolve_install_folder"]


def default_install_folder(config: Config | None = None) -> Path:
    """The default install folder, ``~/.RapidMiner/extensions`` unless configured."""
    configured = (config or Config()).get("install.default_folder")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".RapidMiner" / "extensions"


def resolve_install_folder(extension_folder: str | None, config: Config | None = None) -> Path:
    """Return the validated user override, or the default install folder.

    Raises:
        InvalidInstallPathError: If the override is not an existing directory.
    """
    if extension_folder:
        path = Path(extension_folder).expanduser()
        if not path.is_dir():
            raise InvalidInstallPathError(path=extension_folder)
        return path

    path = default_install_folder(config)
    logger.info("Using default installation path: %s", path)
    return path
