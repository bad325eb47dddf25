"""Transitive exclusion computation over a resolved dependency tree."""

from __future__ import annotations

import logging
from typing import Iterable

from rmxbuild.dependencies.types import ModuleCoordinate, ResolvedModule

logger = logging.getLogger(__name__)

__all__ = ["compute_exclusions"]


def compute_exclusions(roots: Iterable[ResolvedModule]) -> frozenset[ModuleCoordinate]:
    """Collect every coordinate reachable from ``roots``, roots included.

    Walks depth first. A node whose coordinate is already collected is not
    expanded again, which keeps diamonds linear and terminates on cycles.
    """
    excluded: set[ModuleCoordinate] = set()
    stack: list[ResolvedModule] = list(reversed(list(roots)))

    while stack:
        node = stack.pop()
        if node.coordinate in excluded:
            continue
        excluded.add(node.coordinate)
        logger.debug("Excluding %s from being bundled", node.coordinate)
        stack.extend(reversed(node.children))

    return frozenset(excluded)
