"""Main analysis command."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .. import __version__
from ..exceptions import ConceptMapperError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..scanning import resolve_root
from ..semantics import SemanticAnalyzer
from . import app
from ._common import console, err_console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"concept-mapper {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    path: Path = typer.Option(
        Path("."),
        "-C",
        "--path",
        help="Project root to analyze (default: current directory)",
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Output format: rich or json",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Write JSON output to this file instead of the terminal",
    ),
    min_term_frequency: Optional[int] = typer.Option(
        None, "--min-term-frequency", help="Minimum score for a retained concept"
    ),
    max_terms: Optional[int] = typer.Option(
        None, "--max-terms", help="Number of concepts to report"
    ),
    max_files: Optional[int] = typer.Option(
        None, "--max-files", help="Maximum number of files to analyze"
    ),
    ignore: Optional[list[str]] = typer.Option(
        None, "--ignore", help="Glob pattern to exclude (repeatable)"
    ),
    no_comments: bool = typer.Option(False, "--no-comments", help="Ignore code comments"),
    no_docs: bool = typer.Option(False, "--no-docs", help="Skip documentation files"),
    no_identifiers: bool = typer.Option(
        False, "--no-identifiers", help="Ignore identifier names"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Extract domain concepts, their relationships and a glossary from a project."""
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(output_format)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(2)

    try:
        root = resolve_root(path)
        settings = resolve_config(
            config=config,
            min_term_frequency=min_term_frequency,
            max_terms=max_terms,
            max_files=max_files,
            ignore=ignore,
            no_comments=no_comments,
            no_docs=no_docs,
            no_identifiers=no_identifiers,
        )
        result = asyncio.run(SemanticAnalyzer(settings).analyze_project(root))
    except ConceptMapperError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    if output is not None:
        output.write_text(get_formatter("json").format(result) + "\n", encoding="utf-8")
        err_console.print(f"Wrote {len(result.domain_concepts)} concepts to {output}")
    else:
        formatter.render(result)
