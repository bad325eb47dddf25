"""User-supplied extension configuration models."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "DEFAULT_GROUP_ID",
    "DEFAULT_PLATFORM_VERSION",
    "DEFAULT_WRAPPER_VERSION",
    "ResourceSet",
    "ExtensionDependencyRef",
    "DependencySpec",
    "ExtensionConfiguration",
    "coerce_scalar",
    "derive_namespace",
]

DEFAULT_GROUP_ID = "com.rapidminer.extension"
DEFAULT_PLATFORM_VERSION = "6.5.0"
DEFAULT_WRAPPER_VERSION = "2.4"

_WHITESPACE = re.compile(r"\s")


def derive_namespace(name: str) -> str:
    """Derive an extension namespace from its display name ("Web Mining" -> "web_mining")."""
    return _WHITESPACE.sub("_", name).lower()


def coerce_scalar(value: Any) -> Any:
    """Turn a YAML integer into a string and reject YAML floats.

    An unquoted ``7.10`` is parsed as the float ``7.1``; the lost digits cannot
    be recovered, so such values must be quoted.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        raise ValueError(f"unquoted number {value!r} is not a valid version, quote it (e.g. \"7.10\")")
    return value


def _blank_to_none(value: Any) -> Any:
    value = coerce_scalar(value)
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ResourceSet(_FrozenModel):
    """Explicit resource overrides, relative to ``src/main/resources/``.

    ``init_class`` is a dotted class name below ``src/main/java/``.
    Unset or blank slots are resolved heuristically.
    """

    init_class: str | None = None
    operator_definition: str | None = None
    object_definition: str | None = None
    parse_rule_definition: str | None = None
    group_properties: str | None = None
    error_description: str | None = None
    user_errors: str | None = None
    gui_description: str | None = None
    settings_descriptor: str | None = None
    settings_structure_descriptor: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def normalize_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ExtensionDependencyRef(_FrozenModel):
    """A dependency on another extension.

    Either ``namespace`` and ``version`` are given, or ``project`` names a
    sibling project whose own descriptor supplies both.
    """

    namespace: str | None = None
    version: str | None = None
    group: str = DEFAULT_GROUP_ID
    project: str | None = None

    @field_validator("namespace", "version", "project", mode="before")
    @classmethod
    def normalize_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def label(self) -> str:
        """Human readable identification used in error messages."""
        return self.namespace or self.project or "<unnamed>"


class DependencySpec(_FrozenModel):
    """Platform version constraint plus ordered extension dependencies."""

    rapidminer: str | None = DEFAULT_PLATFORM_VERSION
    project: str | None = None
    extensions: list[ExtensionDependencyRef] = Field(default_factory=list)

    @field_validator("rapidminer", "project", mode="before")
    @classmethod
    def normalize_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def explicit_platform_version(self) -> bool:
        """Whether ``rapidminer`` was set by the user rather than defaulted."""
        return "rapidminer" in self.model_fields_set


class ExtensionConfiguration(_FrozenModel):
    """The ``extension`` section of a project file."""

    name: str | None = None
    namespace: str | None = None
    group_id: str | None = DEFAULT_GROUP_ID
    vendor: str | None = None
    homepage: str | None = None
    extension_folder: str | None = None
    wrapper_version: str | None = DEFAULT_WRAPPER_VERSION
    resources: ResourceSet = Field(default_factory=ResourceSet)
    dependencies: DependencySpec = Field(default_factory=DependencySpec)

    @field_validator(
        "name", "namespace", "vendor", "homepage", "extension_folder", "wrapper_version", mode="before"
    )
    @classmethod
    def normalize_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @model_validator(mode="before")
    @classmethod
    def _default_namespace(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        name = _blank_to_none(data.get("name"))
        if name and not _blank_to_none(data.get("namespace")):
            data = {**data, "namespace": derive_namespace(name)}
        return data

    @property
    def compact_name(self) -> str:
        """The name with all whitespace stripped, used in file name templates."""
        return _WHITESPACE.sub("", self.name or "")
