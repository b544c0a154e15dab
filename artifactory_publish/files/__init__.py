"""File expansion for the upload set.

Public API:
    expand_files(workspace, patterns) -> list[Path]
"""

from artifactory_publish.files.expander import expand_files

__all__ = ["expand_files"]
