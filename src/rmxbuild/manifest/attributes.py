"""Manifest attribute names and the immutable ResolvedManifest."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

__all__ = [
    "MANIFEST_VERSION",
    "EXTENSION_TYPE",
    "RESOURCE_ATTRIBUTES",
    "ATTRIBUTE_ORDER",
    "ResolvedManifest",
]

MANIFEST_VERSION = "1.0"
EXTENSION_TYPE = "RapidMiner_Extension"

# ResourceSet slot -> manifest attribute
RESOURCE_ATTRIBUTES: dict[str, str] = {
    "init_class": "Initialization-Class",
    "object_definition": "IOObject-Descriptor",
    "operator_definition": "Operator-Descriptor",
    "parse_rule_definition": "ParseRule-Descriptor",
    "group_properties": "Group-Descriptor",
    "error_description": "Error-Descriptor",
    "user_errors": "UserError-Descriptor",
    "gui_description": "GUI-Descriptor",
    "settings_descriptor": "Settings-Descriptor",
    "settings_structure_descriptor": "SettingsStructure-Descriptor",
}

ATTRIBUTE_ORDER: tuple[str, ...] = (
    "Manifest-Version",
    "Implementation-Vendor",
    "Implementation-Title",
    "Implementation-URL",
    "Implementation-Version",
    "Specification-Title",
    "Specification-Version",
    "RapidMiner-Version",
    "RapidMiner-Type",
    "Plugin-Dependencies",
    "Extension-ID",
    "Namespace",
    *RESOURCE_ATTRIBUTES.values(),
)


class ResolvedManifest(Mapping[str, str]):
    """Write-once mapping of manifest attribute names to string values.

    Every attribute of ATTRIBUTE_ORDER is present; absent optional values are
    empty strings.
    """

    def __init__(self, attributes: Mapping[str, str]) -> None:
        missing = [key for key in ATTRIBUTE_ORDER if key not in attributes]
        if missing:
            raise ValueError(f"Manifest attributes missing: {', '.join(missing)}")
        ordered = {key: attributes[key] for key in ATTRIBUTE_ORDER}
        ordered.update({k: v for k, v in attributes.items() if k not in ordered})
        self._attributes = MappingProxyType(ordered)

    def __getitem__(self, key: str) -> str:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"ResolvedManifest({dict(self._attributes)!r})"

    def render(self) -> str:
        """Render as ``Name: value`` lines in attribute order."""
        return "".join(f"{key}: {value}\n" for key, value in self._attributes.items())
