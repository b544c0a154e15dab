"""Remote path construction for Artifactory deployments.

Layout (must match Artifactory's deploy REST API exactly):
    {base_url}/{repo_key}/{group/path}/{artifact_id}/{version}/{filename}

repo_key defaults to libs-release-local, or libs-snapshot-local for
versions ending in -SNAPSHOT. An explicit repo_key always wins.
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from artifactory_publish.errors import ConfigurationError
from artifactory_publish.types import ArtifactCoordinate

RELEASE_REPO_KEY = "libs-release-local"
SNAPSHOT_REPO_KEY = "libs-snapshot-local"

_ARTIFACTORY_SEGMENT = "/artifactory"


def replace_dots(value: str) -> str:
    """Convert a dotted group id into a path: com.example -> com/example."""
    return value.replace(".", "/")


def select_repo_key(coordinate: ArtifactCoordinate, override: Optional[str] = None) -> str:
    if override:
        return override
    return SNAPSHOT_REPO_KEY if coordinate.is_snapshot else RELEASE_REPO_KEY


def is_pom_file(path: Path, pom: Path) -> bool:
    """True when path is the project POM.

    Only that one file is renamed; other pom.xml files, such as those of
    sub-modules, keep their name.
    """
    return path.resolve() == pom.resolve()


def remote_file_name(path: Path, coordinate: ArtifactCoordinate, is_pom: bool) -> str:
    """POMs are published as {artifact}-{version}.pom; other files keep their name."""
    if is_pom:
        return f"{coordinate.artifact_id}-{coordinate.version}.pom"
    return path.name


def remote_path(coordinate: ArtifactCoordinate, file_name: str, repo_key: str) -> str:
    """Return the repository-relative path for file_name."""
    return "/".join([
        repo_key,
        replace_dots(coordinate.group_id),
        coordinate.artifact_id,
        coordinate.version,
        file_name,
    ])


def artifactory_base_url(url: str) -> str:
    """Return the Artifactory REST root for a configured server URL.

    A URL already pointing somewhere below /artifactory is cut back to it;
    a bare host URL gets /artifactory appended.

    Raises:
        ConfigurationError: the URL has no scheme or host.
    """
    parts = urlsplit(url.strip())
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"Invalid Artifactory URL: {url}")

    path = parts.path.rstrip("/")
    index = path.find(_ARTIFACTORY_SEGMENT)
    if index >= 0:
        path = path[: index + len(_ARTIFACTORY_SEGMENT)]
    else:
        path = f"{path}{_ARTIFACTORY_SEGMENT}"
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def matrix_params(target_props: str) -> str:
    """Render "k=v,k2=v2" as Artifactory matrix parameters ";k=v;k2=v2".

    Malformed pairs and pairs whose value is empty or "null" are dropped.
    """
    rendered: list[str] = []
    for pair in target_props.split(","):
        key, sep, value = pair.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            continue
        unquoted = value.strip("\"'").strip()
        if not unquoted or unquoted.lower() == "null":
            continue
        rendered.append(f";{key}={unquoted}")
    return "".join(rendered)
