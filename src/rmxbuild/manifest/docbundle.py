"""Docbundle cross-reference validation for operator definition files."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from rmxbuild.errors import MalformedResourceError

logger = logging.getLogger(__name__)

__all__ = ["read_docbundle", "check_docbundle"]

DOCBUNDLE_ATTRIBUTE = "docbundle"


def read_docbundle(operators_file: Path) -> str | None:
    """Return the ``docbundle`` attribute of the document root, if any."""
    try:
        root = ET.parse(operators_file).getroot()
    except ET.ParseError as e:
        raise MalformedResourceError(
            resource=str(operators_file), reason=f"invalid XML: {e}"
        ) from e
    return root.attrib.get(DOCBUNDLE_ATTRIBUTE) or None


def check_docbundle(resource_root: Path, operators_path: str, default_path: str) -> Path:
    """Validate that the operator definitions reference an existing doc bundle.

    Args:
        resource_root: The resource source root.
        operators_path: Operator definitions file, relative to ``resource_root``.
        default_path: Conventional operator definitions path, quoted in errors.

    Returns:
        The doc bundle file.

    Raises:
        MalformedResourceError: If the attribute is missing or names a missing file.
    """
    docbundle = read_docbundle(resource_root / operators_path)
    if not docbundle:
        raise MalformedResourceError(
            resource=operators_path,
            reason=(
                "no docbundle defined in operator definitions. Wrong resource file selected? "
                "Please define the path to the operator definitions manually.\n"
                f"Default path to operator definitions: {default_path}"
            ),
        )

    bundle_file = resource_root / f"{docbundle}.xml"
    if not bundle_file.is_file():
        raise MalformedResourceError(
            resource=operators_path,
            reason=f"docbundle file defined in operator definitions ('{docbundle}') does not exist",
        )
    logger.info("Operator definitions '%s' reference doc bundle '%s'", operators_path, docbundle)
    return bundle_file
