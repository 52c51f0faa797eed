"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import SemanticConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    min_term_frequency: Optional[int] = None,
    max_terms: Optional[int] = None,
    max_files: Optional[int] = None,
    ignore: Optional[list[str]] = None,
    no_comments: bool = False,
    no_docs: bool = False,
    no_identifiers: bool = False,
) -> SemanticConfig:
    """Build configuration from CLI options."""
    overrides: dict = {
        "min_term_frequency": min_term_frequency,
        "max_terms": max_terms,
        "max_files": max_files,
    }
    if ignore:
        overrides["ignore_paths"] = list(ignore)
    if no_comments:
        overrides["include_comments"] = False
    if no_docs:
        overrides["include_docs"] = False
    if no_identifiers:
        overrides["include_identifiers"] = False
    return load_config(config_file=config, **overrides)
