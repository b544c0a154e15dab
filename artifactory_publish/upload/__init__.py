"""Upload orchestration against the Artifactory REST API.

Public API:
    upload(descriptor, client=None) -> UploadReport
    remote_path(coordinate, file_name, repo_key) -> str
"""

from artifactory_publish.upload.orchestrator import upload, upload_files
from artifactory_publish.upload.paths import (
    RELEASE_REPO_KEY,
    SNAPSHOT_REPO_KEY,
    remote_path,
    replace_dots,
    select_repo_key,
)
from artifactory_publish.upload.types import UploadOutcome, UploadReport, UploadStatus

__all__ = [
    "RELEASE_REPO_KEY",
    "SNAPSHOT_REPO_KEY",
    "UploadOutcome",
    "UploadReport",
    "UploadStatus",
    "remote_path",
    "replace_dots",
    "select_repo_key",
    "upload",
    "upload_files",
]
