"""Upload orchestrator: publishes the descriptor's files to Artifactory.

Per file, in descriptor order:
1. Compute {repo_key}/{group/path}/{artifact}/{version}/{filename}
   and read the local file. An unreadable file fails before any request.
2. HEAD the remote path. 2xx means the artifact exists: that is a
   conflict unless force_upload is set. 404 means free. Anything else,
   or a network error, fails the file.
3. PUT the file contents. 2xx creates the artifact; anything else fails.

Files are processed strictly one after another. The loop stops at the
first outcome that is not CREATED, so later files are never probed or
uploaded. Files uploaded before the failure stay uploaded.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

from artifactory_publish.errors import ConflictError, TransportError, UploadError
from artifactory_publish.types import UploadDescriptor
from artifactory_publish.upload.client import build_client
from artifactory_publish.upload.paths import (
    artifactory_base_url,
    is_pom_file,
    matrix_params,
    remote_file_name,
    remote_path,
    select_repo_key,
)
from artifactory_publish.upload.types import UploadOutcome, UploadReport, UploadStatus

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404

# Project POM when none is configured, relative to the workspace root.
DEFAULT_POM = "pom.xml"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _local_path(descriptor: UploadDescriptor, file: str) -> Path:
    path = Path(file)
    return path if path.is_absolute() else descriptor.workspace_root / path


def _pom_path(descriptor: UploadDescriptor) -> Path:
    return _local_path(descriptor, descriptor.pom or DEFAULT_POM)


def _failed(path: Path, remote: str, error: UploadError) -> UploadOutcome:
    logger.error("Failed to publish %s: %s", path, error.message)
    return UploadOutcome(file=path, remote_path=remote, status=UploadStatus.FAILED, error=error)


async def _upload_file(
    client: httpx.AsyncClient,
    descriptor: UploadDescriptor,
    base_url: str,
    path: Path,
) -> UploadOutcome:
    """Probe then upload one file, returning its outcome.

    Never raises for HTTP or file errors; they become FAILED outcomes.
    """
    coordinate = descriptor.coordinate
    repo_key = select_repo_key(coordinate, descriptor.repo_key)
    file_name = remote_file_name(path, coordinate, is_pom_file(path, _pom_path(descriptor)))
    remote = remote_path(coordinate, file_name, repo_key)
    url = f"{base_url}/{remote}"

    try:
        content = path.read_bytes()
    except OSError as exc:
        return _failed(path, remote, UploadError(f"Cannot read {path}: {exc}", remote))

    try:
        probe = await client.head(url)
    except httpx.HTTPError as exc:
        return _failed(path, remote, TransportError(
            f"Failed to check whether {remote} exists: {exc}", remote,
        ))

    if _is_success(probe.status_code):
        if not descriptor.force_upload:
            return _failed(path, remote, ConflictError(
                f"Artifact {remote} already exists on the repository; "
                "set force_upload to overwrite it",
                remote,
            ))
        logger.info("Overwriting existing artifact %s", remote)
    elif probe.status_code != HTTP_NOT_FOUND:
        return _failed(path, remote, TransportError(
            f"Unexpected HTTP {probe.status_code} while checking {remote}", remote,
        ))

    try:
        response = await client.put(
            f"{url}{matrix_params(descriptor.target_props)}",
            content=content,
            headers={"Content-Type": "application/octet-stream"},
        )
    except httpx.HTTPError as exc:
        return _failed(path, remote, TransportError(f"Failed to upload {remote}: {exc}", remote))

    if not _is_success(response.status_code):
        return _failed(path, remote, TransportError(
            f"Upload of {remote} failed with HTTP {response.status_code}", remote,
        ))

    logger.info("Published %s to %s", path.name, remote)
    return UploadOutcome(file=path, remote_path=remote, status=UploadStatus.CREATED)


async def upload_files(
    client: httpx.AsyncClient, descriptor: UploadDescriptor
) -> UploadReport:
    """Fold over the files in order, stopping at the first failure.

    The returned report holds every attempted outcome; when it is not
    successful its last outcome is the failure.
    """
    base_url = artifactory_base_url(descriptor.server_url)
    report = UploadReport()
    for file in descriptor.files:
        outcome = await _upload_file(client, descriptor, base_url, _local_path(descriptor, file))
        report.outcomes.append(outcome)
        if outcome.status is not UploadStatus.CREATED:
            break
    return report


async def upload(
    descriptor: UploadDescriptor,
    client: Optional[httpx.AsyncClient] = None,
) -> UploadReport:
    """Publish every file of the descriptor.

    Returns the report when all files were created. Otherwise raises the
    first failure's error (ConflictError, TransportError or UploadError)
    with the partial report attached as error.report.

    A client may be passed in to share connection settings; by default
    one is built from the descriptor's credentials and TLS options.
    """
    if client is None:
        async with build_client(descriptor) as owned_client:
            report = await upload_files(owned_client, descriptor)
    else:
        report = await upload_files(client, descriptor)

    failure = report.first_failure
    if failure is not None and failure.error is not None:
        failure.error.report = report
        raise failure.error

    logger.info("Uploaded %d file(s) for %s", len(report.outcomes), descriptor.coordinate)
    return report
