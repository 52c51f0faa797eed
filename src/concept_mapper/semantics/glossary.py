"""Glossary generation from comments and documentation paragraphs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional

from ..config import SemanticConfig
from ..scanning import FileDocument
from .models import Concept, GlossaryEntry
from .relationships import RelationshipMap

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> list[str]:
    """Split prose on blank-line boundaries."""
    return [para for para in _PARAGRAPH_SPLIT_RE.split(text) if para.strip()]


class GlossaryGenerator:
    """Builds one glossary entry per concept, up to the configured limit."""

    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()

    def generate(
        self,
        concepts: Sequence[Concept],
        documents: Sequence[FileDocument],
        relationships: RelationshipMap,
    ) -> list[GlossaryEntry]:
        # Lowercased once; contexts are returned in their original case.
        contexts = [
            (snippet, snippet.lower())
            for doc in documents
            for snippet in (*doc.comments, *split_paragraphs(doc.documentation))
        ]

        entries = []
        for concept in concepts[: self.config.glossary_limit]:
            related = [r.name for r in relationships.related_to(concept.name)]
            definition = self._define(concept.name, contexts)
            if related:
                definition += f" (related to: {', '.join(related)})"
            entries.append(
                GlossaryEntry(
                    term=concept.name,
                    definition=definition,
                    related_terms=tuple(related),
                    frequency=concept.frequency,
                )
            )
        return entries

    def _define(self, term: str, contexts: list[tuple[str, str]]) -> str:
        """Shortest substantial context mentioning the term, else the fallback."""
        min_length = len(term) + self.config.scoring.substantial_context_margin
        best: Optional[str] = None
        for snippet, lowered in contexts:
            if term not in lowered or len(snippet) <= min_length:
                continue
            if best is None or len(snippet) < len(best):
                best = snippet
        if best is None:
            return self.config.scoring.fallback_definition
        return best
