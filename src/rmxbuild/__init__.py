"""rmxbuild - Extension descriptor resolution for RapidMiner extension builds."""

from __future__ import annotations

# Core
from rmxbuild.engine import BuildDescriptor, DescriptorEngine
from rmxbuild.project import ExtensionProject, load_project

# Config
from rmxbuild.config import Config
from rmxbuild.descriptor import (
    DependencySpec,
    ExtensionConfiguration,
    ExtensionDependencyRef,
    ResourceSet,
)

# Resources
from rmxbuild.resources import NotFound, ResolutionFailed, Resolved, ResourceLocator

# Dependencies
from rmxbuild.dependencies import ModuleCoordinate, ResolvedModule, compute_exclusions

# Manifest
from rmxbuild.manifest import ManifestAssembler, ResolvedManifest

# Errors
from rmxbuild.errors import (
    CircularDependencyError,
    ConfigError,
    ConfigNotFoundError,
    ConflictingDependencySpecError,
    ErrorCodes,
    ExtensionError,
    InvalidInstallPathError,
    MalformedResourceError,
    MissingDependencySpecError,
    MissingMandatoryResourceError,
    MissingManifestFieldError,
    MissingUserResourceError,
    NotAnExtensionProjectError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "DescriptorEngine",
    "BuildDescriptor",
    "ExtensionProject",
    "load_project",
    # Config
    "Config",
    "ExtensionConfiguration",
    "ResourceSet",
    "DependencySpec",
    "ExtensionDependencyRef",
    # Resources
    "ResourceLocator",
    "Resolved",
    "NotFound",
    "ResolutionFailed",
    # Dependencies
    "ModuleCoordinate",
    "ResolvedModule",
    "compute_exclusions",
    # Manifest
    "ManifestAssembler",
    "ResolvedManifest",
    # Errors
    "ErrorCodes",
    "ExtensionError",
    "ConfigError",
    "ConfigNotFoundError",
    "MissingMandatoryResourceError",
    "MissingUserResourceError",
    "MalformedResourceError",
    "MissingManifestFieldError",
    "ConflictingDependencySpecError",
    "MissingDependencySpecError",
    "NotAnExtensionProjectError",
    "InvalidInstallPathError",
    "CircularDependencyError",
]
