"""Logical resource kinds and their naming conventions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "SourceSet",
    "ResourceKind",
    "INIT_CLASS",
    "OPERATORS",
    "IO_OBJECTS",
    "PARSE_RULES",
    "GROUPS",
    "ERRORS",
    "USER_ERRORS",
    "GUI",
    "SETTINGS_STRUCTURE",
    "SETTINGS",
    "RESOURCE_KINDS",
    "ALL_KINDS",
]

I18N_PATH = "i18n/"
XML_EXTENSION = ".xml"
PROPERTIES_EXTENSION = ".properties"
JAVA_EXTENSION = ".java"


class SourceSet(Enum):
    """A convention-defined source directory and the package defaults live in."""

    JAVA = ("src/main/java/", "com/rapidminer/")
    RESOURCES = ("src/main/resources/", "com/rapidminer/resources/")

    def __init__(self, root: str, package: str) -> None:
        self.root = root
        self.package = package


@dataclass(frozen=True)
class ResourceKind:
    """Naming convention for one logical resource.

    Attributes:
        attribute: Slot name on ResourceSet holding the user override.
        name: Identifying substring; also the default file name prefix.
        suffix: File extension used for the default name and the scan filter.
        subdirectory: Subdirectory of the source set package holding the default file.
        mandatory: Whether an unresolvable resource is an error.
        excluded_modifier: Scan candidates whose file name contains this are skipped.
        source_set: The directory the resource lives in.
    """

    attribute: str
    name: str
    suffix: str
    subdirectory: str = ""
    mandatory: bool = False
    excluded_modifier: str | None = None
    source_set: SourceSet = SourceSet.RESOURCES

    @property
    def is_class(self) -> bool:
        """Whether the resource resolves to a fully qualified class name."""
        return self.source_set is SourceSet.JAVA

    def default_path(self, compact_name: str) -> str:
        """Conventional path relative to the source set root."""
        return f"{self.source_set.package}{self.subdirectory}{self.name}{compact_name}{self.suffix}"


INIT_CLASS = ResourceKind(
    "init_class", "PluginInit", JAVA_EXTENSION, mandatory=True, source_set=SourceSet.JAVA
)
OPERATORS = ResourceKind(
    "operator_definition", "Operators", XML_EXTENSION, mandatory=True, excluded_modifier="OperatorsDoc"
)
IO_OBJECTS = ResourceKind("object_definition", "ioobjects", XML_EXTENSION)
PARSE_RULES = ResourceKind("parse_rule_definition", "parserules", XML_EXTENSION)
GROUPS = ResourceKind("group_properties", "groups", PROPERTIES_EXTENSION)
ERRORS = ResourceKind("error_description", "Errors", PROPERTIES_EXTENSION, I18N_PATH)
USER_ERRORS = ResourceKind("user_errors", "UserErrorMessage", PROPERTIES_EXTENSION, I18N_PATH)
GUI = ResourceKind("gui_description", "GUI", PROPERTIES_EXTENSION, I18N_PATH)
SETTINGS_STRUCTURE = ResourceKind("settings_structure_descriptor", "settings", XML_EXTENSION)
SETTINGS = ResourceKind("settings_descriptor", "Settings", PROPERTIES_EXTENSION, I18N_PATH)

RESOURCE_KINDS: tuple[ResourceKind, ...] = (
    OPERATORS,
    IO_OBJECTS,
    PARSE_RULES,
    GROUPS,
    ERRORS,
    USER_ERRORS,
    GUI,
    SETTINGS_STRUCTURE,
    SETTINGS,
)

ALL_KINDS: tuple[ResourceKind, ...] = (INIT_CLASS, *RESOURCE_KINDS)
