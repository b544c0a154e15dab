"""Types for the upload orchestrator.

UploadOutcome records what happened to one file; UploadReport collects
them in upload order. A report is successful only when every outcome is
CREATED.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Optional

from artifactory_publish.errors import UploadError


class UploadStatus(StrEnum):
    CREATED = "created"
    SKIPPED_EXISTS = "skipped_exists"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadOutcome:
    """Result of publishing a single file."""

    file: Path
    remote_path: str
    status: UploadStatus
    error: Optional[UploadError] = None

    def to_dict(self) -> dict:
        return {
            "file": str(self.file),
            "remote_path": self.remote_path,
            "status": self.status.value,
            "error": self.error.message if self.error else None,
        }


@dataclass
class UploadReport:
    """Ordered per-file outcomes for one publish run."""

    outcomes: list[UploadOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(o.status is UploadStatus.CREATED for o in self.outcomes)

    @property
    def first_failure(self) -> Optional[UploadOutcome]:
        return next(
            (o for o in self.outcomes if o.status is not UploadStatus.CREATED),
            None,
        )

    @property
    def created(self) -> list[UploadOutcome]:
        return [o for o in self.outcomes if o.status is UploadStatus.CREATED]

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
