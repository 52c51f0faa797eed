"""Public API for Concept Mapper.

Example:
    >>> from concept_mapper import analyze
    >>>
    >>> result = analyze("/path/to/project")
    >>> [c.name for c in result.domain_concepts][:5]
    >>>
    >>> # With customization
    >>> result = analyze("/path/to/project", min_term_frequency=1, max_files=200)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

from .config import load_config
from .logging_config import get_logger
from .scanning import resolve_root
from .semantics import SemanticAnalyzer, SemanticResult

logger = get_logger(__name__)


async def analyze_async(
    path: str | Path = ".",
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> SemanticResult:
    """Analyze a project from inside a running event loop.

    Args:
        path: Project root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: SemanticConfig field overrides (e.g. max_terms=50)

    Raises:
        InvalidPathError: If path is not an existing directory
        ConfigurationError: If configuration is invalid
    """
    root = resolve_root(path)
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Analyzing {root}")
    return await SemanticAnalyzer(config).analyze_project(root)


def analyze(
    path: str | Path = ".",
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> SemanticResult:
    """Analyze a project and return its semantic summary.

    Same arguments as analyze_async(); runs its own event loop.
    """
    return asyncio.run(analyze_async(path, config_file=config_file, **overrides))
