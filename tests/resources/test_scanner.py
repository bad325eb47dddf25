"""Tests for scan_files()."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from rmxbuild.resources.scanner import scan_files


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return path


class TestScanFilesBasic:
    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directory yields nothing."""
        assert list(scan_files(tmp_path, ".xml")) == []

    def test_missing_root_yields_nothing(self, tmp_path: Path) -> None:
        """A missing root is not an error."""
        assert list(scan_files(tmp_path / "missing", ".xml")) == []

    def test_suffix_filter(self, tmp_path: Path) -> None:
        """Only files with the requested suffix are yielded."""
        _touch(tmp_path / "a.xml")
        _touch(tmp_path / "b.properties")
        assert list(scan_files(tmp_path, ".xml")) == [tmp_path / "a.xml"]

    def test_nested_files(self, tmp_path: Path) -> None:
        """Files in subdirectories are found."""
        _touch(tmp_path / "com" / "rapidminer" / "x.xml")
        assert list(scan_files(tmp_path, ".xml")) == [tmp_path / "com" / "rapidminer" / "x.xml"]

    def test_hidden_entries_skipped(self, tmp_path: Path) -> None:
        """Dot files and dot directories are skipped."""
        _touch(tmp_path / ".hidden.xml")
        _touch(tmp_path / ".git" / "config.xml")
        assert list(scan_files(tmp_path, ".xml")) == []


class TestScanFilesOrder:
    def test_sorted_depth_first(self, tmp_path: Path) -> None:
        """Entries are visited sorted by name, descending into directories in place."""
        _touch(tmp_path / "c.xml")
        _touch(tmp_path / "b" / "z.xml")
        _touch(tmp_path / "b" / "a.xml")
        _touch(tmp_path / "a.xml")
        result = [p.relative_to(tmp_path).as_posix() for p in scan_files(tmp_path, ".xml")]
        assert result == ["a.xml", "b/a.xml", "b/z.xml", "c.xml"]

    def test_order_independent_of_creation(self, tmp_path: Path) -> None:
        """Creation order does not influence the scan order."""
        for name in ("Operators3.xml", "Operators1.xml", "Operators2.xml"):
            _touch(tmp_path / name)
        result = [p.name for p in scan_files(tmp_path, ".xml")]
        assert result == ["Operators1.xml", "Operators2.xml", "Operators3.xml"]


class TestScanFilesDepthAndErrors:
    def test_max_depth_1(self, tmp_path: Path) -> None:
        """max_depth=1 only scans the root level."""
        _touch(tmp_path / "root.xml")
        _touch(tmp_path / "sub" / "deep.xml")
        assert [p.name for p in scan_files(tmp_path, ".xml", max_depth=1)] == ["root.xml"]

    def test_permission_error_continues(self, tmp_path: Path) -> None:
        """PermissionError on a subdirectory is logged and scanning continues."""
        _touch(tmp_path / "good.xml")
        _touch(tmp_path / "forbidden" / "secret.xml")

        original_scandir = os.scandir

        def mock_scandir(path):
            if str(path).endswith("forbidden"):
                raise PermissionError("Access denied")
            return original_scandir(path)

        with patch("os.scandir", side_effect=mock_scandir):
            result = [p.name for p in scan_files(tmp_path, ".xml")]

        assert result == ["good.xml"]

    def test_scan_is_lazy(self, tmp_path: Path) -> None:
        """Stopping after the first match does not walk the remaining tree."""
        _touch(tmp_path / "a" / "first.xml")
        _touch(tmp_path / "b" / "second.xml")

        visited: list[str] = []
        original_scandir = os.scandir

        def recording_scandir(path):
            visited.append(Path(path).name)
            return original_scandir(path)

        with patch("os.scandir", side_effect=recording_scandir):
            first = next(scan_files(tmp_path, ".xml"))

        assert first.name == "first.xml"
        assert "b" not in visited
