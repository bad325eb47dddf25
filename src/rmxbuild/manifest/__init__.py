"""Manifest attribute assembly."""

from __future__ import annotations

from rmxbuild.manifest.assembler import ManifestAssembler
from rmxbuild.manifest.attributes import ATTRIBUTE_ORDER, RESOURCE_ATTRIBUTES, ResolvedManifest
from rmxbuild.manifest.docbundle import check_docbundle, read_docbundle

__all__ = [
    "ATTRIBUTE_ORDER",
    "RESOURCE_ATTRIBUTES",
    "ManifestAssembler",
    "ResolvedManifest",
    "check_docbundle",
    "read_docbundle",
]
