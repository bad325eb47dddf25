"""Dependency types: coordinates, resolved module trees, sibling projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rmxbuild.descriptor.models import ExtensionConfiguration

__all__ = [
    "ModuleCoordinate",
    "ResolvedModule",
    "ResolvedDependency",
    "ProvidedDependency",
    "SiblingProject",
]


@dataclass(frozen=True, order=True)
class ModuleCoordinate:
    """A (group, artifact name, version) triple."""

    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, notation: str) -> ModuleCoordinate:
        """Parse ``group:name:version`` notation."""
        parts = notation.split(":")
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Invalid module coordinate '{notation}', expected 'group:name:version'")
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


@dataclass(eq=False)
class ResolvedModule:
    """A node of the resolved dependency tree handed over by the dependency resolver.

    Nodes may be shared between parents, and pathological trees may even
    contain cycles.
    """

    coordinate: ModuleCoordinate
    children: list[ResolvedModule] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"ResolvedModule({self.coordinate}, children={len(self.children)})"


@dataclass(frozen=True)
class ResolvedDependency:
    """A concrete extension dependency."""

    namespace: str
    version: str


@runtime_checkable
class SiblingProject(Protocol):
    """Another project of the same build that can be depended upon."""

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str | None: ...

    def extension_descriptor(self) -> ExtensionConfiguration | None:
        """The project's extension configuration, or None if it is not an extension."""
        ...


@dataclass(frozen=True)
class ProvidedDependency:
    """A dependency supplied by the host at run time.

    Exactly one of ``coordinate`` and ``project`` is set.
    """

    coordinate: ModuleCoordinate | None = None
    project: SiblingProject | None = None

    def __str__(self) -> str:
        if self.coordinate is not None:
            return str(self.coordinate)
        return f"project '{self.project.name}'"
