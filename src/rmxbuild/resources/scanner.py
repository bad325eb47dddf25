"""Directory scanner yielding candidate files in a deterministic order."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

__all__ = ["scan_files"]


def scan_files(
    root: Path,
    suffix: str,
    max_depth: int = 32,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Yield files below ``root`` whose name ends with ``suffix``.

    Entries of each directory are visited sorted by name, depth first, so the
    first yielded match is stable across filesystems. Hidden entries are
    skipped. A missing root yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        logger.info("Scan root %s does not exist, nothing to scan", root)
        return

    visited_real_paths: set[Path] = {root.resolve()}

    def _scan_dir(dir_path: Path, depth: int) -> Iterator[Path]:
        if depth > max_depth:
            logger.info("Max depth %d exceeded at %s, skipping", max_depth, dir_path)
            return

        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as e:
            logger.error("Permission denied scanning %s: %s", dir_path, e)
            return
        except OSError as e:
            logger.error("OS error scanning %s: %s", dir_path, e)
            return

        for entry in entries:
            if entry.name.startswith("."):
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file(follow_symlinks=follow_symlinks)
                is_symlink = entry.is_symlink()
            except OSError as e:
                logger.error("OS error accessing %s: %s", entry.path, e)
                continue

            entry_path = Path(entry.path)

            if is_dir:
                if is_symlink:
                    if not follow_symlinks:
                        continue
                    real = entry_path.resolve()
                    if real in visited_real_paths:
                        logger.warning("Symlink cycle detected at %s -> %s, skipping", entry_path, real)
                        continue
                    visited_real_paths.add(real)
                yield from _scan_dir(entry_path, depth + 1)
            elif is_file and entry.name.endswith(suffix):
                yield entry_path

    yield from _scan_dir(root, depth=1)
