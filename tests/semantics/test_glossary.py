"""Tests for glossary generation."""

from conftest import make_doc

from concept_mapper.config import SemanticConfig
from concept_mapper.semantics import (
    Concept,
    GlossaryGenerator,
    RelatedConcept,
    RelationshipMap,
    split_paragraphs,
)


def generate(concepts, documents, relationships=None, **options):
    generator = GlossaryGenerator(SemanticConfig(**options))
    return generator.generate(concepts, documents, relationships or RelationshipMap())


class TestSplitParagraphs:
    def test_blank_lines_separate(self):
        text = "# Title\n\nFirst paragraph\nstill first.\n   \nSecond."
        assert split_paragraphs(text) == ["# Title", "First paragraph\nstill first.", "Second."]

    def test_empty(self):
        assert split_paragraphs("") == []


class TestGlossaryGenerator:
    """Test definition selection."""

    def test_shortest_substantial_comment(self):
        doc = make_doc(
            "a.js",
            comments=[
                "ledger",
                "the ledger keeps every posted entry forever",
                "ledger of posted entries",
            ],
        )
        entries = generate([Concept("ledger", 12)], [doc])
        assert entries[0].definition == "ledger of posted entries"

    def test_documentation_paragraph(self):
        doc = make_doc(
            "README.md",
            documentation="# Billing\n\nAn invoice is a request for payment.\n\nSee also ledgers.",
        )
        entries = generate([Concept("invoice", 8)], [doc])
        assert entries[0].definition == "An invoice is a request for payment."

    def test_match_ignores_case(self):
        doc = make_doc("a.js", comments=["Ledger entries are immutable"])
        entries = generate([Concept("ledger", 12)], [doc])
        assert entries[0].definition == "Ledger entries are immutable"

    def test_fallback_definition(self):
        doc = make_doc("a.js", comments=["short ledger"])
        entries = generate([Concept("ledger", 12)], [doc])
        assert entries[0].definition == "A key concept in this project"

    def test_related_suffix(self):
        relationships = RelationshipMap(
            related={"ledger": [RelatedConcept("invoice", 3), RelatedConcept("payment", 2)]}
        )
        entries = generate([Concept("ledger", 12)], [], relationships)
        assert entries[0].definition == (
            "A key concept in this project (related to: invoice, payment)"
        )
        assert entries[0].related_terms == ("invoice", "payment")

    def test_entry_limit(self):
        concepts = [Concept(f"term{i}", 10 - i) for i in range(5)]
        assert len(generate(concepts, [], max_terms=3)) == 3
        assert len(generate(concepts, [], max_glossary_entries=2)) == 2

    def test_entries_carry_frequency(self):
        entries = generate([Concept("ledger", 12), Concept("invoice", 7)], [])
        assert [(e.term, e.frequency) for e in entries] == [("ledger", 12), ("invoice", 7)]
