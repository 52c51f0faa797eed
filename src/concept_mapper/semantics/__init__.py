"""Semantic extraction engine.

Turns a project tree into weighted domain concepts, a co-occurrence
graph, a glossary and a concept -> file index.

Usage:
    from concept_mapper.semantics import SemanticAnalyzer

    result = await SemanticAnalyzer().analyze_project("/path/to/project")
    result.to_dict()
"""

from .analyzer import SemanticAnalyzer
from .assembler import ResultAssembler
from .corpus import Corpus, CorpusBuild, CorpusBuilder, TermWeight
from .glossary import GlossaryGenerator, split_paragraphs
from .models import (
    Concept,
    ConceptEdge,
    ConceptNode,
    ConceptualModel,
    GlossaryEntry,
    RelatedConcept,
    SemanticResult,
)
from .relationships import RelationshipDetector, RelationshipMap
from .scoring import COMMON_PROGRAMMING_TERMS, NGRAM_STOPWORDS, ConceptScorer

__all__ = [
    # Pipeline
    "SemanticAnalyzer",
    "CorpusBuilder",
    "ConceptScorer",
    "RelationshipDetector",
    "GlossaryGenerator",
    "ResultAssembler",
    # Models
    "Concept",
    "ConceptEdge",
    "ConceptNode",
    "ConceptualModel",
    "Corpus",
    "CorpusBuild",
    "GlossaryEntry",
    "RelatedConcept",
    "RelationshipMap",
    "SemanticResult",
    "TermWeight",
    # Constants and helpers
    "COMMON_PROGRAMMING_TERMS",
    "NGRAM_STOPWORDS",
    "split_paragraphs",
]
