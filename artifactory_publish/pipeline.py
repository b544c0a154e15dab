"""Publish pipeline: resolve, expand, then upload.

Flow:
1. resolve_params() validates the config and picks the coordinates.
   Any failure here is raised before a single request is made.
2. expand_descriptor() turns the file patterns into concrete paths.
3. upload() probes and uploads each file in order.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import httpx

from artifactory_publish.files import expand_files
from artifactory_publish.resolver import resolve_params
from artifactory_publish.types import UploadDescriptor
from artifactory_publish.upload import UploadReport, upload

logger = logging.getLogger(__name__)


def expand_descriptor(descriptor: UploadDescriptor) -> UploadDescriptor:
    """Return a copy of descriptor with its patterns expanded to files.

    The expander keeps duplicates; here they are dropped by resolved path,
    keeping the first occurrence, so a file listed explicitly and matched
    again by a later glob is only uploaded once.
    """
    matches = expand_files(descriptor.workspace_root, descriptor.files)
    unique: dict[Path, str] = {}
    for path in matches:
        # Always absolute; upload only joins relative entries to the workspace.
        unique.setdefault(path.resolve(), str(path.absolute()))
    if len(unique) < len(matches):
        logger.debug("Dropped %d duplicate file(s)", len(matches) - len(unique))
    return dataclasses.replace(descriptor, files=tuple(unique.values()))


async def publish(
    config: Mapping[str, Any],
    workspace: Optional[Path] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> UploadReport:
    """Run the whole publish step for one configuration.

    Raises:
        ConfigurationError / ManifestError: before any network call.
        ConflictError / TransportError / UploadError: first upload failure.
    """
    descriptor = expand_descriptor(resolve_params(config, workspace))

    if not descriptor.files:
        logger.warning("No files matched; nothing will be uploaded")
    for file in descriptor.files:
        logger.info("Planned upload: %s (%s)", file, descriptor.coordinate)

    return await upload(descriptor, client=client)
