"""Publish CI build artifacts to an Artifactory repository.

Public API:
    publish(config, workspace) -> UploadReport
    resolve_params(config, workspace) -> UploadDescriptor
    expand_files(workspace, patterns) -> list[Path]
    upload(descriptor) -> UploadReport
"""

from artifactory_publish.files import expand_files
from artifactory_publish.pipeline import expand_descriptor, publish
from artifactory_publish.resolver import resolve_params
from artifactory_publish.types import ArtifactCoordinate, UploadDescriptor
from artifactory_publish.upload import UploadOutcome, UploadReport, UploadStatus, upload

__all__ = [
    "ArtifactCoordinate",
    "UploadDescriptor",
    "UploadOutcome",
    "UploadReport",
    "UploadStatus",
    "expand_descriptor",
    "expand_files",
    "publish",
    "resolve_params",
    "upload",
]
