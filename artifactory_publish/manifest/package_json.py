"""package.json reader for artifact coordinates.

The artifact id comes from "artifactId" (falling back to the npm "name"),
the group id from "groupId" (or "group"), and the version from "version".
Numeric versions are normalised to strings.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from artifactory_publish.errors import ManifestParseError
from artifactory_publish.manifest.common import (
    ManifestResult,
    build_coordinate,
    locate_manifest,
)

logger = logging.getLogger(__name__)

MANIFEST_FORMAT = "package"

NOT_FOUND_MESSAGE = "Given package file has to exist"
PARSE_ERROR_MESSAGE = "An error happened while trying to parse the package file"
INCOMPLETE_MESSAGE = "Some artifact details are missing from package file"


def read_package_json(workspace: Optional[Path], path: str) -> ManifestResult:
    """Read coordinates from the package descriptor at path.

    Raises:
        ManifestNotFound: the file does not exist under workspace.
        ManifestParseError: the file is not a JSON object.
        ManifestIncomplete: group, artifact or version is missing.
    """
    pkg_path = locate_manifest(workspace, path, MANIFEST_FORMAT, NOT_FOUND_MESSAGE)

    try:
        data = json.loads(pkg_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("Failed to parse %s: %s", pkg_path, exc)
        raise ManifestParseError(PARSE_ERROR_MESSAGE, MANIFEST_FORMAT) from exc

    if not isinstance(data, dict):
        logger.error("%s does not contain a JSON object", pkg_path)
        raise ManifestParseError(PARSE_ERROR_MESSAGE, MANIFEST_FORMAT)

    coordinate = build_coordinate(
        data.get("groupId") or data.get("group"),
        data.get("artifactId") or data.get("name"),
        data.get("version"),
        MANIFEST_FORMAT,
        INCOMPLETE_MESSAGE,
    )
    logger.debug("Read %s from %s", coordinate, pkg_path)
    return ManifestResult(coordinate=coordinate, path=path)
