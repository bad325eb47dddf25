"""Resolution of platform and extension-to-extension dependencies."""

from __future__ import annotations

import logging
from typing import Mapping

from rmxbuild.dependencies.types import (
    ModuleCoordinate,
    ProvidedDependency,
    ResolvedDependency,
    SiblingProject,
)
from rmxbuild.descriptor.models import DependencySpec, ExtensionDependencyRef
from rmxbuild.errors import (
    ConfigError,
    ConflictingDependencySpecError,
    MissingDependencySpecError,
    NotAnExtensionProjectError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "RMX_PREFIX",
    "PLATFORM_GROUP",
    "PLATFORM_ARTIFACT",
    "DependencyResolver",
    "format_plugin_dependencies",
]

RMX_PREFIX = "rmx_"
PLATFORM_GROUP = "com.rapidminer.studio"
PLATFORM_ARTIFACT = "rapidminer-studio-core"


def format_plugin_dependencies(dependencies: list[ResolvedDependency]) -> str:
    """Format dependencies as ``rmx_<namespace>[<version>]`` entries joined by ``"; "``."""
    return "; ".join(f"{RMX_PREFIX}{dep.namespace}[{dep.version}]" for dep in dependencies)


class DependencyResolver:
    """Resolves the declared dependencies of one extension.

    Sibling project references of the declaration are looked up by key in
    ``siblings``.
    """

    def __init__(
        self,
        spec: DependencySpec,
        siblings: Mapping[str, SiblingProject] | None = None,
    ) -> None:
        self._spec = spec
        self._siblings: Mapping[str, SiblingProject] = siblings or {}

    def sibling(self, key: str) -> SiblingProject:
        """Look up a sibling project by its reference key.

        Raises:
            ConfigError: If no project is registered under ``key``.
            NotAnExtensionProjectError: If the registered object is not a project.
        """
        try:
            project = self._siblings[key]
        except KeyError:
            raise ConfigError(message=f"Unknown sibling project reference '{key}'") from None
        if not isinstance(project, SiblingProject):
            raise NotAnExtensionProjectError(project_name=key)
        return project

    # ----- Extensions -----

    def resolve_extension(self, ref: ExtensionDependencyRef) -> ResolvedDependency:
        """Resolve a single dependency reference to a (namespace, version) pair.

        Raises:
            ConflictingDependencySpecError: If explicit coordinates and a project are both set.
            MissingDependencySpecError: If neither is set.
            NotAnExtensionProjectError: If the referenced project has no extension descriptor.
        """
        if ref.project:
            explicit = [name for name in ("namespace", "version") if getattr(ref, name)]
            if explicit:
                raise ConflictingDependencySpecError(dependency=ref.label, fields=explicit)
            return self._resolve_sibling(ref.project)

        if not ref.namespace:
            raise MissingDependencySpecError(dependency=ref.label, field_name="namespace")
        if not ref.version:
            raise MissingDependencySpecError(dependency=ref.label, field_name="version")
        return ResolvedDependency(namespace=ref.namespace, version=ref.version)

    def resolve_extensions(self) -> list[ResolvedDependency]:
        """Resolve all extension dependencies, preserving declaration order."""
        return [self.resolve_extension(ref) for ref in self._spec.extensions]

    def plugin_dependencies(self) -> str:
        """The aggregate dependency string for the manifest."""
        return format_plugin_dependencies(self.resolve_extensions())

    def _resolve_sibling(self, key: str) -> ResolvedDependency:
        project = self.sibling(key)
        descriptor = project.extension_descriptor()
        if descriptor is None:
            raise NotAnExtensionProjectError(project_name=project.name)
        if not descriptor.namespace:
            raise MissingDependencySpecError(dependency=project.name, field_name="namespace")
        if not project.version:
            raise MissingDependencySpecError(dependency=project.name, field_name="version")
        return ResolvedDependency(namespace=descriptor.namespace, version=project.version)

    # ----- Platform -----

    def platform_version(self) -> str:
        """The minimum platform version, explicit or taken from the platform project.

        Raises:
            ConflictingDependencySpecError: If an explicit version and a project are both set.
            MissingDependencySpecError: If no version can be determined.
        """
        spec = self._spec
        if spec.project:
            if spec.explicit_platform_version and spec.rapidminer:
                raise ConflictingDependencySpecError(dependency="rapidminer", fields=["rapidminer"])
            version = self.sibling(spec.project).version
        else:
            version = spec.rapidminer
        if not version:
            raise MissingDependencySpecError(dependency="rapidminer", field_name="version")
        return version

    def platform_dependency(self) -> ProvidedDependency:
        """The platform core the extension compiles against."""
        if self._spec.project:
            self.platform_version()
            return ProvidedDependency(project=self.sibling(self._spec.project))
        coordinate = ModuleCoordinate(PLATFORM_GROUP, PLATFORM_ARTIFACT, self.platform_version())
        return ProvidedDependency(coordinate=coordinate)

    def provided_dependencies(self) -> list[ProvidedDependency]:
        """Platform core followed by every extension dependency, in declaration order."""
        provided = [self.platform_dependency()]
        logger.info("Adding RapidMiner Core dependency (%s)", provided[0])
        for ref in self._spec.extensions:
            if ref.project:
                self.resolve_extension(ref)
                dependency = ProvidedDependency(project=self.sibling(ref.project))
            else:
                resolved = self.resolve_extension(ref)
                dependency = ProvidedDependency(
                    coordinate=ModuleCoordinate(ref.group, resolved.namespace, resolved.version)
                )
            logger.info("Adding RapidMiner Extension dependency (%s)", dependency)
            provided.append(dependency)
        return provided
