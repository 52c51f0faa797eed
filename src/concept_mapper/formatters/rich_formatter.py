"""Rich terminal formatter for Concept Mapper."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..semantics import SemanticResult
from .base import BaseFormatter

MAX_GLOSSARY_ROWS = 15
MAX_DEFINITION_CHARS = 120


def _truncate(text: str, limit: int = MAX_DEFINITION_CHARS) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


class RichFormatter(BaseFormatter):
    """Summary panel, concept table, glossary and graph summary."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: SemanticResult) -> None:
        self._print_summary(result)
        if result.domain_concepts:
            self._print_concepts(result)
        if result.domain_glossary:
            self._print_glossary(result)
        for warning in result.warnings:
            self.console.print(f"[yellow]warning:[/yellow] {escape(warning)}", highlight=False)

    def format(self, result: SemanticResult) -> str:
        with self.console.capture() as capture:
            self.render(result)
        return capture.get()

    def _print_summary(self, result: SemanticResult) -> None:
        model = result.conceptual_model
        self.console.print(
            Panel(
                f"[bold]{len(result.domain_concepts)}[/bold] concepts from "
                f"[bold]{result.files_analyzed}[/bold] files\n"
                f"Concept graph: {len(model.nodes)} nodes, {len(model.edges)} edges",
                title="[bold cyan]Concept Mapper[/bold cyan]",
                expand=False,
            )
        )

    def _print_concepts(self, result: SemanticResult) -> None:
        table = Table(title="Domain concepts", show_lines=False)
        table.add_column("Concept", style="bold")
        table.add_column("Score", justify="right")
        table.add_column("Files", justify="right")
        table.add_column("Related")
        for concept in result.domain_concepts:
            related = ", ".join(f"{r.name} ({r.strength})" for r in concept.related_concepts)
            files = len(result.concept_locations.get(concept.name, []))
            table.add_row(concept.name, str(concept.frequency), str(files), related)
        self.console.print(table)

    def _print_glossary(self, result: SemanticResult) -> None:
        table = Table(title="Glossary")
        table.add_column("Term", style="bold")
        table.add_column("Definition")
        for entry in result.domain_glossary[:MAX_GLOSSARY_ROWS]:
            table.add_row(entry.term, escape(_truncate(entry.definition)))
        self.console.print(table)
