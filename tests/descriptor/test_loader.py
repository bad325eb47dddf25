"""Tests for load_project_file()."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from rmxbuild.descriptor.loader import load_project_file
from rmxbuild.errors import ConfigError, ConfigNotFoundError


class TestLoadProjectFile:
    def test_full_file(self, web_mining) -> None:
        """A complete file yields version and extension section."""
        project_file = load_project_file(web_mining.root / "extension.yaml")
        assert project_file.version == "1.0.0"
        assert project_file.extension.name == "Web Mining"
        assert project_file.extension.namespace == "web_mining"
        assert len(project_file.extension.dependencies.extensions) == 2

    def test_directory_accepted(self, web_mining) -> None:
        """A project directory resolves to its extension.yaml."""
        assert load_project_file(web_mining.root).version == "1.0.0"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_project_file(tmp_path / "extension.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken YAML raises ConfigError."""
        path = tmp_path / "extension.yaml"
        path.write_text("{{invalid yaml:")
        with pytest.raises(ConfigError):
            load_project_file(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """A YAML list raises ConfigError."""
        path = tmp_path / "extension.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_project_file(path)

    def test_validation_error(self, tmp_path: Path) -> None:
        """Unknown keys raise ConfigError naming the file."""
        path = tmp_path / "extension.yaml"
        path.write_text(yaml.safe_dump({"extension": {"name": "X", "colour": "red"}}))
        with pytest.raises(ConfigError, match="colour"):
            load_project_file(path)

    def test_plain_project(self, tmp_path: Path) -> None:
        """A file without extension section describes a plain project."""
        path = tmp_path / "extension.yaml"
        path.write_text(yaml.safe_dump({"name": "utils", "version": 2}))
        project_file = load_project_file(path)
        assert project_file.extension is None
        assert project_file.version == "2"

    def test_unquoted_decimal_version(self, tmp_path: Path) -> None:
        """An unquoted decimal version raises ConfigError instead of losing digits."""
        path = tmp_path / "extension.yaml"
        path.write_text("version: 1.10\nextension:\n  name: Web Mining\n  dependencies:\n    rapidminer: 7.10\n")
        with pytest.raises(ConfigError, match="quote"):
            load_project_file(path)

    def test_quoted_decimal_version(self, tmp_path: Path) -> None:
        """Quoted versions survive unchanged."""
        path = tmp_path / "extension.yaml"
        path.write_text('version: "1.10"\nextension:\n  name: Web Mining\n  dependencies:\n    rapidminer: "7.10"\n')
        project_file = load_project_file(path)
        assert project_file.version == "1.10"
        assert project_file.extension.dependencies.rapidminer == "7.10"

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is a plain project without version."""
        path = tmp_path / "extension.yaml"
        path.write_text("")
        project_file = load_project_file(path)
        assert project_file.version is None
        assert project_file.extension is None
