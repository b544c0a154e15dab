"""Error taxonomy for the publish step.

Every failure the plugin can report derives from PublishError and carries
a human-readable message. The CLI prints that message and exits non-zero;
library callers can catch the specific subclass they care about.

  ConfigurationError  : missing URL, no coordinate source, bad values
  ManifestError       : pom.xml / package.json could not yield coordinates
  UploadError         : a HEAD probe or PUT upload did not succeed
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from artifactory_publish.upload.types import UploadReport


class PublishError(Exception):
    """Base class for every error surfaced to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(PublishError):
    """Raised when the plugin configuration is incomplete or invalid."""


# ---------------------------------------------------------------------------
# Manifest errors
# ---------------------------------------------------------------------------

class ManifestError(PublishError):
    """Raised when coordinates cannot be read from a manifest file.

    manifest_format is "pom" or "package" so callers can tell which
    reader failed without parsing the message.
    """

    def __init__(self, message: str, manifest_format: str) -> None:
        super().__init__(message)
        self.manifest_format = manifest_format


class ManifestNotFound(ManifestError):
    """The configured manifest path does not exist in the workspace."""


class ManifestParseError(ManifestError):
    """The manifest exists but is not well-formed."""


class ManifestIncomplete(ManifestError):
    """The manifest parsed but lacks group, artifact or version."""


# ---------------------------------------------------------------------------
# Upload errors
# ---------------------------------------------------------------------------

class UploadError(PublishError):
    """Raised when a file could not be published.

    report is attached by the orchestrator before raising, so callers can
    see which files were created before the failure.
    """

    def __init__(self, message: str, remote_path: str = "") -> None:
        super().__init__(message)
        self.remote_path = remote_path
        self.report: Optional["UploadReport"] = None


class ConflictError(UploadError):
    """The artifact already exists and force_upload is not set."""


class TransportError(UploadError):
    """Network failure or unexpected HTTP status from the repository."""
