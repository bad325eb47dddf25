"""Resolution result types: Resolved, NotFound, ResolutionFailed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from rmxbuild.errors import ExtensionError

__all__ = [
    "ResolutionSource",
    "Resolved",
    "NotFound",
    "ResolutionFailed",
    "ResolutionResult",
    "ResolvedResources",
]


class ResolutionSource(str, Enum):
    """Which step of the lookup produced a resolved value."""

    USER = "user"
    DEFAULT = "default"
    SCAN = "scan"


@dataclass(frozen=True)
class Resolved:
    """A resource was found. ``value`` is a posix path or a dotted class name."""

    value: str
    source: ResolutionSource

    @property
    def found(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value

    def value_or(self, default: str = "") -> str:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """An optional resource is absent; the feature is simply not provided."""

    kind: str

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise LookupError(f"Resource '{self.kind}' was not found")

    def value_or(self, default: str = "") -> str:
        return default


@dataclass(frozen=True)
class ResolutionFailed:
    """Resolution failed with an error that the caller decides how to handle."""

    error: ExtensionError

    @property
    def found(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise self.error

    def value_or(self, default: str = "") -> str:
        return default


ResolutionResult = Union[Resolved, NotFound, ResolutionFailed]


@dataclass(frozen=True)
class ResolvedResources:
    """Resolution results for every resource slot, keyed by ResourceSet attribute."""

    results: Mapping[str, ResolutionResult] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    def __getitem__(self, attribute: str) -> ResolutionResult:
        return self.results[attribute]

    def value(self, attribute: str) -> str:
        """Resolved value, or empty string when absent or failed."""
        result = self.results.get(attribute)
        if result is None:
            return ""
        return result.value_or("")

    def failures(self) -> list[ResolutionFailed]:
        """All failed resolutions in slot order."""
        return [r for r in self.results.values() if isinstance(r, ResolutionFailed)]
