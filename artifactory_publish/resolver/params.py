"""Parameter resolution from raw plugin config to a validated UploadDescriptor.

Resolution flow:
1. The Artifactory URL is mandatory; nothing else is checked without it.
2. Defaults are applied (anonymous credentials, no files, no force).
3. Coordinates are taken from the config when group_id, artifact_id and
   version are all present. Otherwise the first configured manifest
   (pom, then package) is read. With neither, resolution fails.
4. A manifest that supplied coordinates is added to the upload set
   unless the files list already names it.

resolve_params() is pure: the same (config, workspace) always produces
the same descriptor and no module-level state is touched. Glob patterns
in "files" are left untouched; expansion happens in the pipeline.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from artifactory_publish.errors import ConfigurationError
from artifactory_publish.manifest import MANIFEST_READERS, read_manifest
from artifactory_publish.types import ArtifactCoordinate, UploadDescriptor

logger = logging.getLogger(__name__)

URL_MISSING_MESSAGE = "Artifactory URL is missing and Mandatory"
DETAILS_MISSING_MESSAGE = (
    "Artifact details must be specified manually if no Pom file is given"
)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"", "false", "0", "no", "off"}


# ---------------------------------------------------------------------------
# Value coercion
# ---------------------------------------------------------------------------

def coerce_bool(value: object, key: str) -> bool:
    """Return value as a strict boolean.

    Booleans pass through, None is False, and strings are matched
    case-insensitively against the usual on/off spellings.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in _TRUE_VALUES:
            return True
        if normalised in _FALSE_VALUES:
            return False
    raise ConfigurationError(f"Cannot interpret {value!r} as a boolean for '{key}'")


def coerce_text(value: object) -> str:
    """Return value as a stripped string; None and blanks become ""."""
    if value is None:
        return ""
    return str(value).strip()


def _secret(value: object) -> str:
    # Credentials are kept byte-for-byte; only None becomes "".
    return "" if value is None else str(value)


def split_patterns(value: object) -> list[str]:
    """Normalise the "files" setting into an ordered list of patterns.

    Accepts a list of strings or a comma-separated string. Blank entries
    are dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise ConfigurationError(
            f"'files' must be a list of patterns, got {type(value).__name__}"
        )
    return [text for text in (coerce_text(item) for item in items) if text]


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _contains_path(files: Iterable[str], path: str) -> bool:
    target = Path(path)
    return any(Path(item) == target for item in files)


# ---------------------------------------------------------------------------
# Coordinate resolution
# ---------------------------------------------------------------------------

def _explicit_coordinate(config: Mapping[str, Any]) -> Optional[ArtifactCoordinate]:
    values = [coerce_text(config.get(key)) for key in ("group_id", "artifact_id", "version")]
    if all(values):
        return ArtifactCoordinate(*values)
    return None


def _merge_explicit(
    config: Mapping[str, Any], coordinate: ArtifactCoordinate
) -> ArtifactCoordinate:
    """Let explicitly configured fields override manifest-derived ones."""
    return ArtifactCoordinate(
        group_id=coerce_text(config.get("group_id")) or coordinate.group_id,
        artifact_id=coerce_text(config.get("artifact_id")) or coordinate.artifact_id,
        version=coerce_text(config.get("version")) or coordinate.version,
    )


def resolve_coordinate(
    config: Mapping[str, Any],
    workspace: Optional[Path],
    files: list[str],
) -> tuple[ArtifactCoordinate, list[str]]:
    """Pick the coordinate source and return (coordinate, files).

    files is returned with the manifest appended when a manifest was read.
    """
    explicit = _explicit_coordinate(config)
    if explicit is not None:
        logger.debug("Using explicit coordinates %s", explicit)
        return explicit, files

    for key in MANIFEST_READERS:
        manifest_path = coerce_text(config.get(key))
        if not manifest_path:
            continue
        result = read_manifest(key, workspace, manifest_path)
        coordinate = _merge_explicit(config, result.coordinate)
        logger.info("Read coordinates %s from %s", coordinate, result.path)
        if not _contains_path(files, result.path):
            files = [*files, result.path]
        return coordinate, files

    raise ConfigurationError(DETAILS_MISSING_MESSAGE)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def resolve_params(
    config: Mapping[str, Any], workspace: Optional[Path] = None
) -> UploadDescriptor:
    """Build a validated UploadDescriptor from raw configuration.

    Args:
        config: Raw key/value settings (url, username, password, group_id,
            artifact_id, version, pom, package, files, repo_key,
            force_upload, ...). Unknown keys are ignored.
        workspace: Root against which manifests and files are resolved.

    Raises:
        ConfigurationError: URL missing or no coordinate source.
        ManifestError: a configured manifest could not be used.
    """
    url = coerce_text(config.get("url"))
    if not url:
        raise ConfigurationError(URL_MISSING_MESSAGE)

    files = _unique(split_patterns(config.get("files")))
    workspace_root = (Path(workspace) if workspace is not None else Path.cwd()).resolve()
    coordinate, files = resolve_coordinate(config, workspace_root, files)

    pem_file_path = coerce_text(config.get("pem_file_path")) or None
    return UploadDescriptor(
        server_url=url,
        coordinate=coordinate,
        workspace_root=workspace_root,
        username=coerce_text(config.get("username")),
        password=_secret(config.get("password")),
        access_token=_secret(config.get("access_token")),
        api_key=_secret(config.get("api_key")),
        repo_key=coerce_text(config.get("repo_key")) or None,
        files=tuple(files),
        force_upload=coerce_bool(config.get("force_upload"), "force_upload"),
        pom=coerce_text(config.get("pom")) or None,
        target_props=coerce_text(config.get("target_props")),
        insecure=coerce_bool(config.get("insecure"), "insecure"),
        pem_file_path=pem_file_path,
        pem_file_contents=coerce_text(config.get("pem_file_contents")) or None,
    )
