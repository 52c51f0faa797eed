"""Packages scored concepts, glossary and relationships into a SemanticResult."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Optional

from ..config import SemanticConfig
from ..scanning import FileDocument
from .models import (
    Concept,
    ConceptEdge,
    ConceptNode,
    ConceptualModel,
    GlossaryEntry,
    SemanticResult,
)
from .relationships import RelationshipMap


class ResultAssembler:
    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()

    def assemble(
        self,
        concepts: Sequence[Concept],
        glossary: Sequence[GlossaryEntry],
        relationships: RelationshipMap,
        documents: Mapping[str, FileDocument],
        warnings: Sequence[str] = (),
    ) -> SemanticResult:
        top = concepts[: self.config.max_terms]
        return SemanticResult(
            domain_concepts=tuple(
                replace(c, related_concepts=tuple(relationships.related_to(c.name)))
                for c in top
            ),
            domain_glossary=tuple(sorted(glossary, key=lambda entry: -entry.frequency)),
            conceptual_model=self.build_conceptual_model(concepts, relationships),
            concept_locations=self.locate(top, documents),
            warnings=tuple(warnings),
            files_analyzed=len(documents),
        )

    def build_conceptual_model(
        self, concepts: Sequence[Concept], relationships: RelationshipMap
    ) -> ConceptualModel:
        """Graph of the top concepts; edges only between retained nodes."""
        top = concepts[: self.config.scoring.graph_node_limit]
        node_ids = {c.name for c in top}

        nodes = tuple(ConceptNode(id=c.name, label=c.name, weight=c.frequency or 1) for c in top)
        edges = tuple(
            ConceptEdge(source=c.name, target=related.name, weight=related.strength)
            for c in top
            for related in relationships.related_to(c.name)
            if related.name in node_ids
        )
        return ConceptualModel(nodes=nodes, edges=edges)

    @staticmethod
    def locate(
        concepts: Sequence[Concept], documents: Mapping[str, FileDocument]
    ) -> dict[str, list[str]]:
        """Concept -> paths whose normalized text contains it."""
        return {
            c.name: [path for path, doc in documents.items() if doc.mentions(c.name)]
            for c in concepts
        }
