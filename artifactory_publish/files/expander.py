"""Glob expansion of the configured file patterns.

Each pattern is resolved relative to the workspace root (absolute
patterns are used as-is). "*" matches within one directory level and
"**" recurses. Patterns without glob characters are literal paths and
are kept only when the file exists.

Ordering: pattern order first, then sorted matches within a pattern, so
the same workspace always expands the same way. Duplicates across
patterns are preserved; deduplication is the caller's decision.
"""

import logging
from glob import has_magic
from pathlib import Path, PurePath, PurePosixPath
from typing import Iterable

logger = logging.getLogger(__name__)


def glob_root_and_pattern(candidate: PurePath) -> tuple[str, str]:
    """Return the filesystem root and relative glob pattern for an absolute path."""
    anchor = candidate.anchor
    if not anchor:
        raise ValueError(f"Expected absolute path, received '{candidate}'")

    root_text = (candidate.drive + candidate.root) or anchor
    relative_parts = candidate.parts[1:]
    pattern = PurePosixPath(*relative_parts).as_posix() if relative_parts else "*"
    return root_text, pattern


def _expand_pattern(workspace: Path, pattern: str) -> list[Path]:
    candidate = Path(pattern)
    if not has_magic(pattern):
        path = candidate if candidate.is_absolute() else workspace / candidate
        return [path] if path.is_file() else []

    if candidate.is_absolute():
        root_text, relative = glob_root_and_pattern(candidate)
        matches = Path(root_text).glob(relative)
    else:
        matches = workspace.glob(pattern)
    return sorted(path for path in matches if path.is_file())


def expand_files(workspace: Path, patterns: Iterable[str]) -> list[Path]:
    """Expand patterns into the ordered list of matching files.

    Patterns that match nothing contribute nothing; an empty pattern list
    yields an empty list.
    """
    workspace = Path(workspace)
    expanded: list[Path] = []
    for pattern in patterns:
        matches = _expand_pattern(workspace, pattern)
        if not matches:
            logger.warning("Pattern %r matched no files in %s", pattern, workspace)
        expanded.extend(matches)
    return expanded
