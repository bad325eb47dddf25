"""Extension projects and loading them, with their siblings, from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from rmxbuild.config import Config
from rmxbuild.dependencies.types import SiblingProject
from rmxbuild.descriptor.loader import load_project_file
from rmxbuild.descriptor.models import ExtensionConfiguration
from rmxbuild.errors import CircularDependencyError, NotAnExtensionProjectError
from rmxbuild.resources.kinds import INIT_CLASS
from rmxbuild.resources.locator import ResourceLocator

logger = logging.getLogger(__name__)

__all__ = ["ExtensionProject", "load_project"]


class ExtensionProject:
    """A project of the build, optionally carrying an extension descriptor.

    Satisfies the SiblingProject protocol, so projects can depend on each
    other.
    """

    def __init__(
        self,
        root: str | Path,
        extension: ExtensionConfiguration | None = None,
        version: str | None = None,
        name: str | None = None,
        siblings: Mapping[str, SiblingProject] | None = None,
    ) -> None:
        """Initialize the project.

        Args:
            root: Project root directory.
            extension: Extension configuration; None for a plain project.
            version: Build version of the project.
            name: Project name, defaults to the root directory name.
            siblings: Projects referenced by the dependency declarations, keyed by reference.
        """
        self._root = Path(root)
        self._extension = extension
        self._version = version
        self._name = name or self._root.resolve().name
        self._siblings: dict[str, SiblingProject] = dict(siblings or {})

    def __repr__(self) -> str:
        return f"ExtensionProject(name={self._name!r}, version={self._version!r})"

    @property
    def root(self) -> Path:
        return self._root

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str | None:
        return self._version

    @property
    def siblings(self) -> Mapping[str, SiblingProject]:
        return self._siblings

    def extension_descriptor(self) -> ExtensionConfiguration | None:
        return self._extension

    def require_descriptor(self) -> ExtensionConfiguration:
        """Return the extension descriptor or raise NotAnExtensionProjectError."""
        if self._extension is None:
            raise NotAnExtensionProjectError(project_name=self._name)
        return self._extension

    @property
    def artifact_id(self) -> str | None:
        """Published artifact id; the extension namespace."""
        return self._extension.namespace if self._extension else None

    @property
    def group(self) -> str | None:
        """Published group; the extension group id."""
        return self._extension.group_id if self._extension else None

    def is_initialized(self, config: Config | None = None) -> bool:
        """Whether the project already contains an extension init class."""
        descriptor = self.require_descriptor()
        locator = ResourceLocator(self._root, descriptor.compact_name, config)
        return locator.resolve(INIT_CLASS, descriptor.resources.init_class).found


def load_project(root: str | Path, version: str | None = None) -> ExtensionProject:
    """Load the project at ``root`` and every sibling project it references.

    Sibling references are directories relative to the referencing project.

    Args:
        root: Project root directory containing ``extension.yaml``.
        version: Build version; overrides the version in the project file.

    Raises:
        ConfigNotFoundError: If a project file is missing.
        ConfigError: If a project file is invalid.
        CircularDependencyError: If sibling projects reference each other in a loop.
    """
    return _ProjectLoader().load(Path(root), version)


class _ProjectLoader:
    def __init__(self) -> None:
        self._loaded: dict[Path, ExtensionProject] = {}
        self._loading: list[Path] = []

    def load(self, root: Path, version: str | None = None) -> ExtensionProject:
        real = root.resolve()
        if real in self._loading:
            idx = self._loading.index(real)
            cycle = [p.name for p in self._loading[idx:]] + [real.name]
            raise CircularDependencyError(cycle_path=cycle)
        if real in self._loaded and version is None:
            return self._loaded[real]

        project_file = load_project_file(root)
        self._loading.append(real)
        try:
            siblings: dict[str, SiblingProject] = {}
            extension = project_file.extension
            if extension is not None:
                for reference in _sibling_references(extension):
                    if reference not in siblings:
                        logger.info("Loading sibling project '%s' of %s", reference, root)
                        siblings[reference] = self.load(root / reference)
        finally:
            self._loading.pop()

        project = ExtensionProject(
            root=root,
            extension=extension,
            version=version or project_file.version,
            name=project_file.name,
            siblings=siblings,
        )
        self._loaded[real] = project
        return project


def _sibling_references(extension: ExtensionConfiguration) -> list[str]:
    references = []
    if extension.dependencies.project:
        references.append(extension.dependencies.project)
    references += [ref.project for ref in extension.dependencies.extensions if ref.project]
    return references
