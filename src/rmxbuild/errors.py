"""Error hierarchy for the rmxbuild descriptor engine."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ExtensionError",
    "ConfigNotFoundError",
    "ConfigError",
    "MissingMandatoryResourceError",
    "MissingUserResourceError",
    "MalformedResourceError",
    "MissingManifestFieldError",
    "ConflictingDependencySpecError",
    "MissingDependencySpecError",
    "NotAnExtensionProjectError",
    "InvalidInstallPathError",
    "CircularDependencyError",
    "ErrorCodes",
]


class ExtensionError(Exception):
    """Base error for all rmxbuild errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ExtensionError):
    """Raised when a project or configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ExtensionError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class MissingMandatoryResourceError(ExtensionError):
    """Raised when no candidate exists for a mandatory resource kind."""

    def __init__(self, kind: str, default_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_MANDATORY_RESOURCE",
            message=(
                f"Mandatory '{kind}' resource file is missing. No candidate found!\n"
                f"Default path: {default_path}"
            ),
            details={"kind": kind, "default_path": default_path},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """The logical resource kind that could not be found."""
        return self.details["kind"]


class MissingUserResourceError(ExtensionError):
    """Raised when an explicitly configured resource path does not exist."""

    def __init__(self, kind: str, user_path: str, default_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_USER_RESOURCE",
            message=(
                f"Resource file for resource '{kind}' does not exist: '{user_path}'\n"
                f"Default path: {default_path}"
            ),
            details={"kind": kind, "user_path": user_path, "default_path": default_path},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """The logical resource kind whose configured path is missing."""
        return self.details["kind"]

    @property
    def user_path(self) -> str:
        """The configured path that was probed."""
        return self.details["user_path"]


class MalformedResourceError(ExtensionError):
    """Raised when a resource exists but is internally inconsistent."""

    def __init__(self, resource: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_RESOURCE",
            message=f"Malformed resource '{resource}': {reason}",
            details={"resource": resource, "reason": reason},
            **kwargs,
        )


class MissingManifestFieldError(ExtensionError):
    """Raised when a mandatory manifest field has no value."""

    def __init__(self, field_name: str, hint: str = "", **kwargs: Any) -> None:
        message = f"No value for mandatory field '{field_name}' defined."
        if hint:
            message = f"{message} {hint}"
        super().__init__(
            code="MISSING_MANIFEST_FIELD",
            message=message,
            details={"field": field_name},
            **kwargs,
        )

    @property
    def field_name(self) -> str:
        """The name of the missing field."""
        return self.details["field"]


class ConflictingDependencySpecError(ExtensionError):
    """Raised when a dependency sets both explicit coordinates and a sibling project."""

    def __init__(self, dependency: str, fields: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CONFLICTING_DEPENDENCY_SPEC",
            message=(
                f"Dependency '{dependency}': either specify {' / '.join(fields)} or a project. "
                "Both is not allowed!"
            ),
            details={"dependency": dependency, "fields": fields},
            **kwargs,
        )


class MissingDependencySpecError(ExtensionError):
    """Raised when a dependency sets neither explicit coordinates nor a sibling project."""

    def __init__(self, dependency: str, field_name: str, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_DEPENDENCY_SPEC",
            message=(
                f"Missing extension {field_name} for dependency '{dependency}'. "
                f"Please specify either a {field_name} or a project dependency."
            ),
            details={"dependency": dependency, "field": field_name},
            **kwargs,
        )


class NotAnExtensionProjectError(ExtensionError):
    """Raised when a sibling project referenced as an extension has no descriptor."""

    def __init__(self, project_name: str, **kwargs: Any) -> None:
        super().__init__(
            code="NOT_AN_EXTENSION_PROJECT",
            message=(
                f"The project '{project_name}' doesn't look like an extension project. "
                "Please make sure it declares an 'extension' section."
            ),
            details={"project": project_name},
            **kwargs,
        )


class InvalidInstallPathError(ExtensionError):
    """Raised when the configured install folder is not a directory."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_INSTALL_PATH",
            message=(
                f"The path to the extension installation folder '{path}' is invalid. "
                "Please specify a path to a valid directory or remove 'extension_folder' "
                "to use the default path."
            ),
            details={"path": path},
            **kwargs,
        )


class CircularDependencyError(ExtensionError):
    """Raised when sibling project files reference each other in a loop."""

    def __init__(self, cycle_path: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CIRCULAR_DEPENDENCY",
            message=f"Circular project dependency detected: {' -> '.join(cycle_path)}",
            details={"cycle_path": cycle_path},
            **kwargs,
        )


class ErrorCodes:
    """All rmxbuild error codes as constants.

    Example:
        if error.code == ErrorCodes.MISSING_USER_RESOURCE:
            fix_configuration()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MISSING_MANDATORY_RESOURCE = "MISSING_MANDATORY_RESOURCE"
    MISSING_USER_RESOURCE = "MISSING_USER_RESOURCE"
    MALFORMED_RESOURCE = "MALFORMED_RESOURCE"
    MISSING_MANIFEST_FIELD = "MISSING_MANIFEST_FIELD"
    CONFLICTING_DEPENDENCY_SPEC = "CONFLICTING_DEPENDENCY_SPEC"
    MISSING_DEPENDENCY_SPEC = "MISSING_DEPENDENCY_SPEC"
    NOT_AN_EXTENSION_PROJECT = "NOT_AN_EXTENSION_PROJECT"
    INVALID_INSTALL_PATH = "INVALID_INSTALL_PATH"
    CIRCULAR_DEPENDENCY = "CIRCULAR_DEPENDENCY"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
