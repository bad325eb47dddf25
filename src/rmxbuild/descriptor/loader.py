"""Loading of ``extension.yaml`` project files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from rmxbuild.descriptor.models import ExtensionConfiguration, coerce_scalar
from rmxbuild.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["PROJECT_FILE_NAME", "ProjectFile", "load_project_file"]

PROJECT_FILE_NAME = "extension.yaml"


class ProjectFile(BaseModel):
    """Parsed project file: build identity plus the optional extension section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    version: str | None = None
    extension: ExtensionConfiguration | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_to_str(cls, value: Any) -> Any:
        return coerce_scalar(value)


def load_project_file(path: Path) -> ProjectFile:
    """Load and validate a project file.

    A directory is accepted and resolved to its ``extension.yaml``.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid YAML or fails validation.
    """
    path = Path(path)
    if path.is_dir():
        path = path / PROJECT_FILE_NAME
    if not path.exists():
        raise ConfigNotFoundError(config_path=str(path))

    content = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in project file: {path}") from e

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ConfigError(message=f"Project file must be a YAML mapping: {path}")

    try:
        project_file = ProjectFile.model_validate(parsed)
    except ValidationError as e:
        raise ConfigError(message=f"Invalid project file {path}: {e}", cause=e) from e
    logger.debug("Loaded project file %s", path)
    return project_file
