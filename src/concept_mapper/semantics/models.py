"""Semantic data models.

Everything here is produced by one analysis run and never mutated after
the result is assembled. SemanticResult.to_dict() is the exchange format
read by document renderers and visualizers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RelatedConcept:
    """A co-occurring partner concept and the number of shared files."""

    name: str
    strength: int


@dataclass(frozen=True)
class Concept:
    """A scored domain term.

    Attributes:
        name: Lowercase term; phrases are space-joined
        frequency: Accumulated heuristic score, not an occurrence count
        related_concepts: Strongest partners first, at most five
    """

    name: str
    frequency: int
    related_concepts: tuple[RelatedConcept, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "frequency": self.frequency,
            "relatedConcepts": [
                {"name": r.name, "strength": r.strength} for r in self.related_concepts
            ],
        }


@dataclass(frozen=True)
class GlossaryEntry:
    """A concept with a definition snippet and related term names."""

    term: str
    definition: str
    related_terms: tuple[str, ...] = ()
    frequency: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term,
            "definition": self.definition,
            "relatedTerms": list(self.related_terms),
        }


@dataclass(frozen=True)
class ConceptNode:
    id: str
    label: str
    weight: int


@dataclass(frozen=True)
class ConceptEdge:
    source: str
    target: str
    weight: int


@dataclass(frozen=True)
class ConceptualModel:
    """Concept graph limited to the top concepts by frequency."""

    nodes: tuple[ConceptNode, ...] = ()
    edges: tuple[ConceptEdge, ...] = ()

    @property
    def node_ids(self) -> frozenset[str]:
        return frozenset(node.id for node in self.nodes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [{"id": n.id, "label": n.label, "weight": n.weight} for n in self.nodes],
            "edges": [
                {"source": e.source, "target": e.target, "weight": e.weight} for e in self.edges
            ],
        }


@dataclass(frozen=True)
class SemanticResult:
    """Complete output of one semantic analysis run.

    Attributes:
        domain_concepts: Top concepts by frequency
        domain_glossary: Glossary entries, highest-frequency concept first
        conceptual_model: Graph of the top concepts
        concept_locations: Concept name -> paths whose text contains it
        warnings: Advisory messages; never affect the fields above
        files_analyzed: Number of files that contributed text
    """

    domain_concepts: tuple[Concept, ...] = ()
    domain_glossary: tuple[GlossaryEntry, ...] = ()
    conceptual_model: ConceptualModel = field(default_factory=ConceptualModel)
    concept_locations: dict[str, list[str]] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    files_analyzed: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the four-field exchange structure (camelCase keys)."""
        return {
            "domainConcepts": [c.to_dict() for c in self.domain_concepts],
            "domainGlossary": [g.to_dict() for g in self.domain_glossary],
            "conceptualModel": self.conceptual_model.to_dict(),
            "conceptLocations": {k: list(v) for k, v in self.concept_locations.items()},
        }
