"""Heuristic lookup of extension resource files.

Usage::

    from rmxbuild.resources import ResourceLocator, OPERATORS

    locator = ResourceLocator("./web-mining", "WebMining")
    result = locator.resolve(OPERATORS)
"""

from __future__ import annotations

from rmxbuild.resources.kinds import (
    ALL_KINDS,
    INIT_CLASS,
    OPERATORS,
    RESOURCE_KINDS,
    ResourceKind,
    SourceSet,
)
from rmxbuild.resources.locator import ResourceLocator
from rmxbuild.resources.scanner import scan_files
from rmxbuild.resources.types import (
    NotFound,
    ResolutionFailed,
    ResolutionResult,
    ResolutionSource,
    Resolved,
    ResolvedResources,
)

__all__ = [
    "ALL_KINDS",
    "INIT_CLASS",
    "OPERATORS",
    "RESOURCE_KINDS",
    "NotFound",
    "ResolutionFailed",
    "ResolutionResult",
    "ResolutionSource",
    "Resolved",
    "ResolvedResources",
    "ResourceKind",
    "ResourceLocator",
    "SourceSet",
    "scan_files",
]
