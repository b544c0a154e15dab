"""pom.xml reader for Maven artifact coordinates.

Uses xml.etree.ElementTree (stdlib) to parse the POM. groupId and
version are inherited from <parent> when the project does not declare
them, mirroring Maven's own inheritance. POMs with and without the
Maven 4.0.0 namespace are both accepted.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from artifactory_publish.errors import ManifestParseError
from artifactory_publish.manifest.common import (
    ManifestResult,
    build_coordinate,
    locate_manifest,
)

logger = logging.getLogger(__name__)

MANIFEST_FORMAT = "pom"

NOT_FOUND_MESSAGE = "Given pom file has to exists"
PARSE_ERROR_MESSAGE = "An error happened while trying to parse the pom file"
INCOMPLETE_MESSAGE = "Some artifact details are missing from Pom file"

# Maven XML namespace used by pom.xml files
_POM_NS = "http://maven.apache.org/POM/4.0.0"


def _ns(tag: str) -> str:
    return f"{{{_POM_NS}}}{tag}"


def _child_text(element: Optional[ET.Element], tag: str) -> Optional[str]:
    """Return the stripped text of a direct child, namespaced or not."""
    if element is None:
        return None
    for candidate in (_ns(tag), tag):
        text = element.findtext(candidate)
        if text and text.strip():
            return text.strip()
    return None


def _parent(root: ET.Element) -> Optional[ET.Element]:
    parent = root.find(_ns("parent"))
    if parent is None:
        parent = root.find("parent")
    return parent


def read_pom(workspace: Optional[Path], path: str) -> ManifestResult:
    """Read groupId/artifactId/version from the POM at path.

    Raises:
        ManifestNotFound: the file does not exist under workspace.
        ManifestParseError: the file is not well-formed XML.
        ManifestIncomplete: a coordinate is missing after inheritance.
    """
    pom_path = locate_manifest(workspace, path, MANIFEST_FORMAT, NOT_FOUND_MESSAGE)

    try:
        root = ET.parse(pom_path).getroot()
    except (ET.ParseError, UnicodeDecodeError) as exc:
        logger.error("Failed to parse %s: %s", pom_path, exc)
        raise ManifestParseError(PARSE_ERROR_MESSAGE, MANIFEST_FORMAT) from exc

    parent = _parent(root)
    coordinate = build_coordinate(
        _child_text(root, "groupId") or _child_text(parent, "groupId"),
        _child_text(root, "artifactId"),
        _child_text(root, "version") or _child_text(parent, "version"),
        MANIFEST_FORMAT,
        INCOMPLETE_MESSAGE,
    )
    logger.debug("Read %s from %s", coordinate, pom_path)
    return ManifestResult(coordinate=coordinate, path=path)
