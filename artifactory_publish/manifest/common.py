"""Helpers shared by the manifest readers."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from artifactory_publish.errors import ManifestIncomplete, ManifestNotFound
from artifactory_publish.types import ArtifactCoordinate


@dataclass(frozen=True)
class ManifestResult:
    """Coordinates read from a manifest, plus the manifest's own path.

    path is the value as configured (relative to the workspace) so the
    resolver can add it to the upload set verbatim.
    """

    coordinate: ArtifactCoordinate
    path: str


def locate_manifest(
    workspace: Optional[Path],
    path: str,
    manifest_format: str,
    message: str,
) -> Path:
    """Resolve path against workspace, raising ManifestNotFound if absent."""
    candidate = Path(path)
    if not candidate.is_absolute() and workspace is not None:
        candidate = Path(workspace) / candidate
    if not candidate.is_file():
        raise ManifestNotFound(message, manifest_format)
    return candidate


def build_coordinate(
    group_id: object,
    artifact_id: object,
    version: object,
    manifest_format: str,
    message: str,
) -> ArtifactCoordinate:
    """Normalise the three fields and fail if any of them is blank."""
    values = [_normalise(value) for value in (group_id, artifact_id, version)]
    if not all(values):
        raise ManifestIncomplete(message, manifest_format)
    return ArtifactCoordinate(*values)


def _normalise(value: object) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value).strip()
