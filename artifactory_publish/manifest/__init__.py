"""Manifest readers that derive artifact coordinates from project files.

Public API:
    MANIFEST_READERS: config key ("pom" / "package") -> reader
    read_manifest(key, workspace, path) -> ManifestResult
"""

from pathlib import Path
from typing import Callable, Optional

from artifactory_publish.manifest.common import ManifestResult
from artifactory_publish.manifest.maven import read_pom
from artifactory_publish.manifest.package_json import read_package_json

ManifestReader = Callable[[Optional[Path], str], ManifestResult]

# Checked in this order when explicit coordinates are incomplete.
MANIFEST_READERS: dict[str, ManifestReader] = {
    "pom": read_pom,
    "package": read_package_json,
}


def read_manifest(key: str, workspace: Optional[Path], path: str) -> ManifestResult:
    """Dispatch to the reader registered for the given config key."""
    return MANIFEST_READERS[key](workspace, path)


__all__ = [
    "MANIFEST_READERS",
    "ManifestReader",
    "ManifestResult",
    "read_manifest",
    "read_package_json",
    "read_pom",
]
