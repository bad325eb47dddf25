"""Descriptor engine: runs resource, dependency and manifest resolution for one build."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from rmxbuild.config import Config
from rmxbuild.dependencies.exclusions import compute_exclusions
from rmxbuild.dependencies.resolver import DependencyResolver
from rmxbuild.dependencies.types import ModuleCoordinate, ProvidedDependency, ResolvedModule
from rmxbuild.descriptor.models import ExtensionConfiguration
from rmxbuild.install import resolve_install_folder
from rmxbuild.manifest.assembler import ManifestAssembler
from rmxbuild.manifest.attributes import ResolvedManifest
from rmxbuild.project import ExtensionProject
from rmxbuild.resources.locator import ResourceLocator
from rmxbuild.resources.types import ResolvedResources

logger = logging.getLogger(__name__)

__all__ = ["BuildDescriptor", "DescriptorEngine"]


@dataclass(frozen=True)
class BuildDescriptor:
    """Everything the packaging step needs from one resolution run."""

    descriptor: ExtensionConfiguration
    version: str
    resources: ResolvedResources
    manifest: ResolvedManifest
    provided: tuple[ProvidedDependency, ...]
    exclusions: frozenset[ModuleCoordinate]

    @property
    def artifact_id(self) -> str:
        return self.descriptor.namespace or ""

    @property
    def group(self) -> str:
        return self.descriptor.group_id or ""


class DescriptorEngine:
    """Resolves the build descriptor of one extension project.

    The engine holds no state between runs; running twice against an
    unchanged project yields equal results.

    Usage::

        project = load_project("./web-mining")
        engine = DescriptorEngine(project)
        build = engine.run(provided_tree)
        build.manifest["Extension-ID"]
    """

    def __init__(self, project: ExtensionProject, config: Config | None = None) -> None:
        """Initialize the engine.

        Raises:
            NotAnExtensionProjectError: If the project has no extension descriptor.
        """
        self._project = project
        self._config = config or Config()
        self._descriptor = project.require_descriptor()
        self._dependencies = DependencyResolver(self._descriptor.dependencies, project.siblings)

    @property
    def descriptor(self) -> ExtensionConfiguration:
        return self._descriptor

    @property
    def dependencies(self) -> DependencyResolver:
        return self._dependencies

    def locator(self) -> ResourceLocator:
        return ResourceLocator(self._project.root, self._descriptor.compact_name, self._config)

    def resolve_resources(self) -> ResolvedResources:
        """Resolve every resource slot; failures are carried, not raised."""
        return self.locator().resolve_all(self._descriptor.resources)

    def assembler(self, resources: ResolvedResources | None = None) -> ManifestAssembler:
        return ManifestAssembler(
            descriptor=self._descriptor,
            version=self._project.version,
            resources=resources if resources is not None else self.resolve_resources(),
            dependencies=self._dependencies,
            project_root=self._project.root,
        )

    def check(self, resources: ResolvedResources | None = None) -> None:
        """Run the check phase; raises on the first violation."""
        self.assembler(resources).check()

    def assemble(self, resources: ResolvedResources | None = None) -> ResolvedManifest:
        """Run the assign phase without checking."""
        return self.assembler(resources).assign()

    def provided_dependencies(self) -> list[ProvidedDependency]:
        """Dependencies the host platform supplies at run time."""
        return self._dependencies.provided_dependencies()

    def compute_exclusions(self, provided_tree: Iterable[ResolvedModule]) -> frozenset[ModuleCoordinate]:
        """Coordinates to leave out of the bundled artifact."""
        exclusions = compute_exclusions(provided_tree)
        for coordinate in sorted(exclusions):
            logger.info("Excluding %s from being bundled into the extension jar.", coordinate)
        return exclusions

    def install_folder(self) -> Path:
        """Folder the built extension is installed into.

        Raises:
            InvalidInstallPathError: If the configured folder is not a directory.
        """
        return resolve_install_folder(self._descriptor.extension_folder, self._config)

    def run(self, provided_tree: Iterable[ResolvedModule] = ()) -> BuildDescriptor:
        """Resolve resources, check, assemble the manifest and compute exclusions.

        Args:
            provided_tree: First-level resolved modules of the provided dependencies.

        Raises:
            ExtensionError: Any check-phase failure; nothing is returned partially.
        """
        resources = self.resolve_resources()
        assembler = self.assembler(resources)
        assembler.check()
        manifest = assembler.assign()
        provided = tuple(self.provided_dependencies())
        exclusions = self.compute_exclusions(provided_tree)
        logger.info(
            "Resolved extension '%s' (%s), %d provided dependencies, %d exclusions",
            self._descriptor.name,
            manifest["Extension-ID"],
            len(provided),
            len(exclusions),
        )
        return BuildDescriptor(
            descriptor=self._descriptor,
            version=self._project.version or "",
            resources=resources,
            manifest=manifest,
            provided=provided,
            exclusions=exclusions,
        )
