"""Heuristic resource locator: user path, then default path, then scan."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from rmxbuild.config import Config
from rmxbuild.descriptor.models import ResourceSet
from rmxbuild.errors import MissingMandatoryResourceError, MissingUserResourceError
from rmxbuild.resources.kinds import ALL_KINDS, ResourceKind
from rmxbuild.resources.scanner import scan_files
from rmxbuild.resources.types import (
    NotFound,
    ResolutionFailed,
    ResolutionResult,
    ResolutionSource,
    Resolved,
    ResolvedResources,
)

logger = logging.getLogger(__name__)

__all__ = ["ResourceLocator"]


class ResourceLocator:
    """Finds the concrete file behind each logical resource of one project.

    Each lookup tries, in order, the user-supplied path, the conventional
    default path derived from the extension name, and finally a scan of the
    source set for a file whose name contains the kind's identifying
    substring. The filesystem is only read.
    """

    def __init__(self, project_root: str | Path, compact_name: str, config: Config | None = None) -> None:
        """Initialize the locator.

        Args:
            project_root: Root directory of the extension project.
            compact_name: Extension name with whitespace stripped.
            config: Optional Config supplying ``scan.max_depth`` and ``scan.follow_symlinks``.
        """
        self._project_root = Path(project_root)
        self._compact_name = compact_name
        config = config or Config()
        self._max_depth: int = config.get("scan.max_depth", 32)
        self._follow_symlinks: bool = config.get("scan.follow_symlinks", False)

    def source_root(self, kind: ResourceKind) -> Path:
        """Absolute directory the given kind is resolved against."""
        return self._project_root / kind.source_set.root

    def default_path(self, kind: ResourceKind) -> str:
        """Conventional path of ``kind``, relative to its source root."""
        return kind.default_path(self._compact_name)

    def resolve(self, kind: ResourceKind, user_value: str | None = None) -> ResolutionResult:
        """Resolve one resource kind.

        Returns:
            Resolved with a posix path relative to the source root (or a dotted
            class name for class kinds), NotFound for an absent optional kind,
            or ResolutionFailed carrying the error for the caller to raise.
        """
        if user_value:
            return self._resolve_user_value(kind, user_value)

        default_path = self.default_path(kind)
        if (self.source_root(kind) / default_path).is_file():
            logger.info("Found default %s resource file: '%s'", kind.name, default_path)
            return Resolved(self._to_value(kind, default_path), ResolutionSource.DEFAULT)

        logger.info(
            "Default %s resource file '%s' not found. Searching for alternatives in %s ...",
            kind.name,
            default_path,
            kind.source_set.root,
        )
        candidate = self._scan(kind)
        if candidate is not None:
            value = self._to_value(kind, candidate)
            logger.info("Selected resource for '%s': %s", kind.name, value)
            return Resolved(value, ResolutionSource.SCAN)

        if kind.mandatory:
            return ResolutionFailed(MissingMandatoryResourceError(kind=kind.name, default_path=default_path))
        logger.info("No optional resource file for '%s' found. Skipping...", kind.name)
        return NotFound(kind.name)

    def resolve_all(self, resources: ResourceSet) -> ResolvedResources:
        """Resolve the init class and every resource slot of ``resources``."""
        results: dict[str, ResolutionResult] = {}
        for kind in ALL_KINDS:
            results[kind.attribute] = self.resolve(kind, getattr(resources, kind.attribute))
        return ResolvedResources(results)

    def _resolve_user_value(self, kind: ResourceKind, user_value: str) -> ResolutionResult:
        if kind.is_class:
            relative = user_value.replace(".", "/") + kind.suffix
        else:
            relative = user_value
        root = self.source_root(kind)
        if not (root / relative).is_file():
            return ResolutionFailed(
                MissingUserResourceError(
                    kind=kind.name,
                    user_path=str(root / relative),
                    default_path=self.default_path(kind),
                )
            )
        logger.info("Using user defined %s resource: '%s'", kind.name, user_value)
        if kind.is_class:
            return Resolved(user_value, ResolutionSource.USER)
        return Resolved(_relative_posix(root, root / relative), ResolutionSource.USER)

    def _scan(self, kind: ResourceKind) -> str | None:
        root = self.source_root(kind)
        if kind.excluded_modifier:
            logger.info("Excluding files which contain %s.", kind.excluded_modifier)
        for path in scan_files(root, kind.suffix, self._max_depth, self._follow_symlinks):
            if kind.name not in path.name:
                continue
            if kind.excluded_modifier and kind.excluded_modifier in path.name:
                logger.debug("%s contains excluded modifier: %s", path, kind.excluded_modifier)
                continue
            logger.info("Found potential %s resource file: %s", kind.name, path)
            return _relative_posix(root, path)
        return None

    @staticmethod
    def _to_value(kind: ResourceKind, relative_path: str) -> str:
        if kind.is_class:
            return relative_path[: -len(kind.suffix)].replace("/", ".")
        return relative_path


def _relative_posix(root: Path, path: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return PurePath(path).as_posix()
