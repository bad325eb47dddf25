"""Manifest assembly in two phases: check, then assign."""

from __future__ import annotations

import logging
from pathlib import Path

from rmxbuild.dependencies.resolver import RMX_PREFIX, DependencyResolver
from rmxbuild.descriptor.models import ExtensionConfiguration
from rmxbuild.errors import MissingManifestFieldError
from rmxbuild.manifest.attributes import (
    EXTENSION_TYPE,
    MANIFEST_VERSION,
    RESOURCE_ATTRIBUTES,
    ResolvedManifest,
)
from rmxbuild.manifest.docbundle import check_docbundle
from rmxbuild.resources.kinds import INIT_CLASS, OPERATORS, SourceSet
from rmxbuild.resources.types import ResolutionFailed, ResolvedResources

logger = logging.getLogger(__name__)

__all__ = ["ManifestAssembler"]


class ManifestAssembler:
    """Builds the manifest attributes of one extension.

    ``check()`` only validates and raises on the first violation.
    ``assign()`` derives every attribute; unset optional values become
    empty strings, never missing keys.
    """

    def __init__(
        self,
        descriptor: ExtensionConfiguration,
        version: str | None,
        resources: ResolvedResources,
        dependencies: DependencyResolver,
        project_root: str | Path,
    ) -> None:
        self._descriptor = descriptor
        self._version = version
        self._resources = resources
        self._dependencies = dependencies
        self._resource_root = Path(project_root) / SourceSet.RESOURCES.root

    def check(self) -> None:
        """Validate mandatory fields, resources and dependency declarations.

        Raises:
            MissingManifestFieldError: If name, group id, version or vendor is missing.
            MissingUserResourceError: If a configured resource path does not exist.
            MissingMandatoryResourceError: If the init class or operator definitions are missing.
            MalformedResourceError: If the operator definitions lack a valid doc bundle.
            ConflictingDependencySpecError: If a dependency is declared ambiguously.
            MissingDependencySpecError: If a dependency is declared incompletely.
            NotAnExtensionProjectError: If a sibling dependency is not an extension.
        """
        descriptor = self._descriptor
        if not descriptor.name:
            raise MissingManifestFieldError(
                "name", "No RapidMiner Extension name defined. Define via 'extension: {name: $NAME}'."
            )
        if not descriptor.group_id:
            raise MissingManifestFieldError(
                "group_id", "Define via 'extension: {group_id: $GROUPID}'. (default: 'com.rapidminer.extension')"
            )
        if not self._version:
            raise MissingManifestFieldError("version", "Define the project 'version'.")
        if not descriptor.vendor:
            raise MissingManifestFieldError("vendor", "Define via 'extension: {vendor: $VENDOR}'.")

        # the init class and operator definitions come first so their errors win
        failures = [self._resources[INIT_CLASS.attribute], self._resources[OPERATORS.attribute]]
        failures += self._resources.failures()
        for result in failures:
            if isinstance(result, ResolutionFailed):
                raise result.error

        check_docbundle(
            self._resource_root,
            self._resources.value(OPERATORS.attribute),
            OPERATORS.default_path(descriptor.compact_name),
        )

        self._dependencies.platform_version()
        self._dependencies.resolve_extensions()
        logger.info("Manifest entries of extension '%s' are valid", descriptor.name)

    def assign(self) -> ResolvedManifest:
        """Derive all manifest attributes."""
        descriptor = self._descriptor
        name = descriptor.name or ""
        version = self._version or ""
        namespace = descriptor.namespace or ""

        attributes: dict[str, str] = {
            "Manifest-Version": MANIFEST_VERSION,
            "Implementation-Vendor": descriptor.vendor or "",
            "Implementation-Title": name,
            "Implementation-URL": descriptor.homepage or "",
            "Implementation-Version": version,
            "Specification-Title": name,
            "Specification-Version": version,
            "RapidMiner-Version": self._dependencies.platform_version(),
            "RapidMiner-Type": EXTENSION_TYPE,
            "Plugin-Dependencies": self._dependencies.plugin_dependencies(),
            "Extension-ID": RMX_PREFIX + namespace,
            "Namespace": namespace,
        }
        for slot, attribute in RESOURCE_ATTRIBUTES.items():
            attributes[attribute] = self._resources.value(slot)
        return ResolvedManifest(attributes)
