"""Extension dependency resolution and bundling exclusions."""

from __future__ import annotations

from rmxbuild.dependencies.exclusions import compute_exclusions
from rmxbuild.dependencies.resolver import (
    RMX_PREFIX,
    DependencyResolver,
    format_plugin_dependencies,
)
from rmxbuild.dependencies.types import (
    ModuleCoordinate,
    ProvidedDependency,
    ResolvedDependency,
    ResolvedModule,
    SiblingProject,
)

__all__ = [
    "RMX_PREFIX",
    "DependencyResolver",
    "ModuleCoordinate",
    "ProvidedDependency",
    "ResolvedDependency",
    "ResolvedModule",
    "SiblingProject",
    "compute_exclusions",
    "format_plugin_dependencies",
]
