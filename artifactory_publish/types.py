"""Shared types for parameter resolution and upload.

ArtifactCoordinate identifies what is published; UploadDescriptor is the
fully resolved configuration handed to the upload orchestrator. Both are
frozen; the descriptor is built once per run and never mutated.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

SNAPSHOT_SUFFIX = "-SNAPSHOT"


@dataclass(frozen=True)
class ArtifactCoordinate:
    """The (group, artifact, version) triple of a published artifact."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def is_snapshot(self) -> bool:
        return self.version.endswith(SNAPSHOT_SUFFIX)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class UploadDescriptor:
    """Validated configuration for a single publish run.

    files holds glob patterns straight out of resolution and concrete
    paths once expand_descriptor() has run. pom is the configured project
    manifest path (relative to workspace_root), used to give the manifest
    its canonical remote name.
    """

    server_url: str
    coordinate: ArtifactCoordinate
    workspace_root: Path
    username: str = ""
    password: str = ""
    access_token: str = ""
    api_key: str = ""
    repo_key: Optional[str] = None
    files: tuple[str, ...] = field(default_factory=tuple)
    force_upload: bool = False
    pom: Optional[str] = None
    target_props: str = ""
    insecure: bool = False
    pem_file_path: Optional[str] = None
    pem_file_contents: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return not (
            self.access_token or (self.username and self.password) or self.api_key
        )
