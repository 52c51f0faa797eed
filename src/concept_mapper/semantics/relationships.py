"""Concept co-occurrence relationships.

Two concepts are related when both occur (by substring containment) in the
normalized text of at least ``min_relationship_strength`` files. The
strength of a relationship is the number of such files.

Containment is plain substring matching: "test" is found inside "latest", and a
concept is found inside any longer concept that contains it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations
from typing import Optional

from ..config import SemanticConfig
from ..logging_config import get_logger
from ..scanning import FileDocument
from .models import Concept, RelatedConcept

logger = get_logger(__name__)


@dataclass
class RelationshipMap:
    """Retained concept pairs and the per-concept partner lists.

    Attributes:
        pair_strengths: Unordered pair (sorted names) -> shared file count,
            only pairs at or above the minimum strength
        related: Concept -> strongest partners first, truncated
    """

    pair_strengths: dict[tuple[str, str], int] = field(default_factory=dict)
    related: dict[str, list[RelatedConcept]] = field(default_factory=dict)

    def strength(self, a: str, b: str) -> int:
        """Strength between two concepts in either direction (0 if unrelated)."""
        key = (a, b) if a <= b else (b, a)
        return self.pair_strengths.get(key, 0)

    def related_to(self, concept: str) -> list[RelatedConcept]:
        return self.related.get(concept, [])

    def adjacency(self) -> dict[str, dict[str, int]]:
        """Full symmetric adjacency before per-concept truncation."""
        result: dict[str, dict[str, int]] = {}
        for (a, b), count in self.pair_strengths.items():
            result.setdefault(a, {})[b] = count
            result.setdefault(b, {})[a] = count
        return result


class RelationshipDetector:
    """Counts concept co-occurrence across file documents."""

    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()

    def detect(
        self, concepts: Sequence[Concept], documents: Sequence[FileDocument]
    ) -> RelationshipMap:
        names = [concept.name for concept in concepts]

        pair_counts: Counter[tuple[str, str]] = Counter()
        for doc in documents:
            present = sorted(name for name in names if doc.mentions(name))
            pair_counts.update(combinations(present, 2))

        min_strength = self.config.scoring.min_relationship_strength
        relationships = RelationshipMap(
            pair_strengths={
                pair: count for pair, count in pair_counts.items() if count >= min_strength
            }
        )

        for partner_of, partners in relationships.adjacency().items():
            ranked = sorted(partners.items(), key=lambda item: (-item[1], item[0]))
            relationships.related[partner_of] = [
                RelatedConcept(name=name, strength=count)
                for name, count in ranked[: self.config.scoring.max_related_concepts]
            ]

        logger.debug(
            f"Detected {len(relationships.pair_strengths)} relationships "
            f"among {len(names)} concepts"
        )
        return relationships
