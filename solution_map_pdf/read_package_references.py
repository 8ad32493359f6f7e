"""Logic for extracting package references from a project manifest."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from solution_map_pdf.package_reference import PackageReference

logger = logging.getLogger(__name__)


def _split_tag(tag: str) -> tuple[str | None, str]:
    """Split a Clark-notation tag ``{uri}local`` into (uri, local)."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return None, tag


def _matches(tag: object, local_name: str, namespace: str | None) -> bool:
    """Whether an element tag has local_name and, if given, lies in namespace."""
    if not isinstance(tag, str):
        return False
    uri, local = _split_tag(tag)
    if local != local_name:
        return False
    return namespace is None or uri == namespace


def read_package_references(
    manifest_path: str, config: dict[str, Any]
) -> list[PackageReference]:
    """Read declared package references from a project manifest.

    Returns an empty list when the path is empty or names no file. Malformed
    XML raises ``ET.ParseError``.
    """
    if not manifest_path:
        return []
    path = Path(manifest_path)
    if not path.is_file():
        logger.debug("No manifest at %s", path)
        return []

    deps_cfg = config["dependencies"]
    tag = deps_cfg["tag"]
    namespace = deps_cfg.get("namespace")
    name_attr = deps_cfg["name_attribute"]
    version_attr = deps_cfg["version_attribute"]

    root = ET.parse(path).getroot()
    packages: list[PackageReference] = []
    for el in root.iter():
        if not _matches(el.tag, tag, namespace):
            continue
        name = el.get(name_attr)
        version = el.get(version_attr)
        if not name or not version:
            continue
        packages.append(PackageReference(name=name, version=version))

    logger.debug("Found %d package references in %s", len(packages), path)
    return packages
