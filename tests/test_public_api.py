"""Tests for the rmxbuild public API surface.

Verifies that all expected names are importable from the top-level
``rmxbuild`` package and that ``__all__`` is comprehensive.
"""

import re

import rmxbuild
from rmxbuild.resources.types import ResolutionSource


class TestPublicAPIImports:
    """Every public component must be importable from ``import rmxbuild``."""

    # -- Core --

    def test_engine_importable(self):
        from rmxbuild import BuildDescriptor, DescriptorEngine

        assert DescriptorEngine is not None
        assert BuildDescriptor is not None

    def test_project_importable(self):
        from rmxbuild import ExtensionProject, load_project

        assert ExtensionProject is not None
        assert callable(load_project)

    # -- Config --

    def test_descriptor_models_importable(self):
        from rmxbuild import DependencySpec, ExtensionConfiguration, ExtensionDependencyRef, ResourceSet

        assert ExtensionConfiguration is not None
        assert ResourceSet is not None
        assert DependencySpec is not None
        assert ExtensionDependencyRef is not None

    # -- Resources --

    def test_result_types_importable(self):
        from rmxbuild import NotFound, ResolutionFailed, Resolved

        assert Resolved("x", ResolutionSource.USER).found
        assert not NotFound("GUI").found
        assert ResolutionFailed is not None

    # -- Dependencies --

    def test_compute_exclusions_importable(self):
        from rmxbuild import compute_exclusions

        assert compute_exclusions([]) == frozenset()

    def test_version_is_set(self):
        assert re.match(r"^\d+\.\d+\.\d+", rmxbuild.__version__)


class TestPublicAPIAll:
    """``__all__`` must list exactly the public names."""

    EXPECTED = {
        "DescriptorEngine",
        "BuildDescriptor",
        "ExtensionProject",
        "load_project",
        "Config",
        "ExtensionConfiguration",
        "ResourceSet",
        "DependencySpec",
        "ExtensionDependencyRef",
        "ResourceLocator",
        "Resolved",
        "NotFound",
        "ResolutionFailed",
        "ModuleCoordinate",
        "ResolvedModule",
        "compute_exclusions",
        "ManifestAssembler",
        "ResolvedManifest",
        "ErrorCodes",
        "ExtensionError",
        "ConfigError",
        "ConfigNotFoundError",
        "MissingMandatoryResourceError",
        "MissingUserResourceError",
        "MalformedResourceError",
        "MissingManifestFieldError",
        "ConflictingDependencySpecError",
        "MissingDependencySpecError",
        "NotAnExtensionProjectError",
        "InvalidInstallPathError",
        "CircularDependencyError",
    }

    def test_all_matches_expected(self):
        assert set(rmxbuild.__all__) == self.EXPECTED

    def test_all_names_are_importable(self):
        for name in rmxbuild.__all__:
            assert hasattr(rmxbuild, name), f"{name} listed in __all__ but missing"
