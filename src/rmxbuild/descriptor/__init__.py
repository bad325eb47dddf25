"""Extension configuration models and project file loading."""

from __future__ import annotations

from rmxbuild.descriptor.loader import PROJECT_FILE_NAME, ProjectFile, load_project_file
from rmxbuild.descriptor.models import (
    DEFAULT_GROUP_ID,
    DEFAULT_PLATFORM_VERSION,
    DEFAULT_WRAPPER_VERSION,
    DependencySpec,
    ExtensionConfiguration,
    ExtensionDependencyRef,
    ResourceSet,
    derive_namespace,
)

__all__ = [
    "DEFAULT_GROUP_ID",
    "DEFAULT_PLATFORM_VERSION",
    "DEFAULT_WRAPPER_VERSION",
    "PROJECT_FILE_NAME",
    "DependencySpec",
    "ExtensionConfiguration",
    "ExtensionDependencyRef",
    "ProjectFile",
    "ResourceSet",
    "derive_namespace",
    "load_project_file",
]
