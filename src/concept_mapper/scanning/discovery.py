"""Candidate file discovery for semantic analysis."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import InvalidPathError
from ..logging_config import get_logger
from .models import CODE_EXTENSIONS, DOCUMENTATION_EXTENSIONS

logger = get_logger(__name__)

DEFAULT_IGNORE_PATTERNS = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
    "**/*.min.js",
    "**/*.bundle.js",
)

CANDIDATE_EXTENSIONS = CODE_EXTENSIONS | DOCUMENTATION_EXTENSIONS
MANIFEST_NAMES = frozenset({"package.json"})
README_PREFIX = "README"


@dataclass
class DiscoveryResult:
    """Files selected for analysis, in stable sorted order."""

    root: Path
    files: list[str] = field(default_factory=list)
    total_candidates: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return self.total_candidates > len(self.files)


def resolve_root(project_dir: str | Path) -> Path:
    """Resolve and validate the project root.

    Raises:
        InvalidPathError: If the path does not exist or is not a directory
    """
    root = Path(project_dir).expanduser()
    if not root.exists():
        raise InvalidPathError(root, "does not exist")
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")
    return root.resolve()


def is_ignored(rel_path: str, patterns: Iterable[str]) -> bool:
    """Match a project-relative POSIX path against glob-style patterns.

    ``**/`` prefixes also match at the project root, and a bare name such as
    ``vendor`` matches any path segment.
    """
    rooted = "/" + rel_path
    segments = rel_path.split("/")
    for pattern in patterns:
        if fnmatchcase(rel_path, pattern) or fnmatchcase(rooted, pattern):
            return True
        if "/" not in pattern and any(fnmatchcase(seg, pattern) for seg in segments):
            return True
    return False


def is_candidate(name: str) -> bool:
    """Whether a file name matches the content patterns."""
    if name in MANIFEST_NAMES or name.startswith(README_PREFIX):
        return True
    return os.path.splitext(name)[1].lower() in CANDIDATE_EXTENSIONS


def discover_files(
    project_dir: str | Path,
    ignore_patterns: Optional[Iterable[str]] = None,
    max_files: Optional[int] = None,
) -> DiscoveryResult:
    """Find candidate files under a project root.

    The result is sorted by relative path and truncated to ``max_files``
    with a warning when there are more candidates.

    Raises:
        InvalidPathError: If the project root is invalid
    """
    root = resolve_root(project_dir)
    patterns = [*DEFAULT_IGNORE_PATTERNS, *(ignore_patterns or [])]

    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        rel_dir = "" if rel_dir == "." else rel_dir + "/"

        dirnames[:] = sorted(d for d in dirnames if not is_ignored(f"{rel_dir}{d}/", patterns))

        for name in filenames:
            if not is_candidate(name):
                continue
            rel_path = f"{rel_dir}{name}"
            if not is_ignored(rel_path, patterns):
                found.append(rel_path)

    found.sort()
    result = DiscoveryResult(root=root, files=found, total_candidates=len(found))

    if max_files is not None and len(found) > max_files:
        message = f"Limiting semantic analysis to {max_files} files out of {len(found)}"
        logger.warning(message)
        result.warnings.append(message)
        result.files = found[:max_files]

    logger.debug(f"Discovered {len(result.files)} files under {root}")
    return result
