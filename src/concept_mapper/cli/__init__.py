"""CLI entry point: registers the analysis command."""

import typer

app = typer.Typer(
    name="concept-mapper",
    help="Concept Mapper - extract domain concepts, relationships and a glossary from a codebase",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .analyze import main as _main_callback  # noqa: F401, E402
