"""End-to-end tests for the semantic pipeline."""

import json

import pytest
from conftest import run_analysis

from concept_mapper import analyze
from concept_mapper.exceptions import InvalidPathError

PROCESS_A = "function processTransaction() {}\n"
PROCESS_B = """// validates the transaction amount
function processTransaction(amount) {
  return amount;
}
"""

BILLING_PROJECT = {
    "README.md": (
        "# Billing\n\n"
        "An invoice records what a customer owes for a billing period.\n\n"
        "Each payment is applied to the oldest open invoice.\n"
    ),
    "package.json": json.dumps(
        {"name": "billing", "description": "Invoice and payment tracking", "keywords": ["invoice"]}
    ),
    "src/invoice.js": (
        "// an invoice groups billable line items\n"
        "class Invoice {\n"
        "  addLineItem(lineItem) { this.lineItems.push(lineItem); }\n"
        "}\n"
    ),
    "src/payment.ts": (
        "/** a payment settles an open invoice */\n"
        "export function applyPayment(invoice: Invoice, payment: Payment) {\n"
        "  invoice.balance -= payment.total;\n"
        "}\n"
    ),
}


class TestEmptyProjects:
    def test_empty_directory(self, tmp_path):
        result = run_analysis(tmp_path)
        assert result.to_dict() == {
            "domainConcepts": [],
            "domainGlossary": [],
            "conceptualModel": {"nodes": [], "edges": []},
            "conceptLocations": {},
        }
        assert result.files_analyzed == 0

    def test_invalid_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            run_analysis(tmp_path / "missing")


class TestSharedConcepts:
    """Two files that both process transactions."""

    def test_transaction_scores_and_locations(self, write_project):
        root = write_project({"a.js": PROCESS_A, "b.js": PROCESS_B})
        result = run_analysis(root, min_term_frequency=1)

        concepts = {c.name: c for c in result.domain_concepts}
        assert concepts["transaction"].frequency == 30
        assert concepts["process"].frequency == 24
        assert result.domain_concepts[0].name == "transaction"
        assert result.concept_locations["transaction"] == ["a.js", "b.js"]

    def test_process_related_to_transaction(self, write_project):
        root = write_project({"a.js": PROCESS_A, "b.js": PROCESS_B})
        result = run_analysis(root, min_term_frequency=1)

        process = next(c for c in result.domain_concepts if c.name == "process")
        related = {r.name: r.strength for r in process.related_concepts}
        assert related["transaction"] == 2

    def test_comment_becomes_definition(self, write_project):
        root = write_project({"a.js": PROCESS_A, "b.js": PROCESS_B})
        result = run_analysis(root, min_term_frequency=1)

        entry = next(g for g in result.domain_glossary if g.term == "transaction")
        assert entry.definition.startswith("validates the transaction amount")


class TestRealisticProject:
    """A small billing project with code, docs and a manifest."""

    def test_invariants(self, write_project):
        root = write_project(BILLING_PROJECT)
        result = run_analysis(root)

        assert result.files_analyzed == 4
        names = [c.name for c in result.domain_concepts]
        assert "invoice" in names
        frequencies = [c.frequency for c in result.domain_concepts]
        assert frequencies == sorted(frequencies, reverse=True)
        assert all(f >= 2 for f in frequencies)

        for concept in result.domain_concepts:
            assert len(concept.related_concepts) <= 5
            assert all(r.strength >= 2 for r in concept.related_concepts)

        model = result.conceptual_model
        assert len(model.nodes) <= 20
        for edge in model.edges:
            assert edge.source in model.node_ids
            assert edge.target in model.node_ids

        assert {g.term for g in result.domain_glossary} <= set(names)
        assert set(result.concept_locations) == set(names)
        for paths in result.concept_locations.values():
            assert paths == sorted(paths)
            assert set(paths) <= set(BILLING_PROJECT)

    def test_deterministic(self, write_project):
        root = write_project(BILLING_PROJECT)
        assert run_analysis(root).to_dict() == run_analysis(root).to_dict()

    def test_shortest_context_defines_term(self, write_project):
        root = write_project(BILLING_PROJECT)
        result = run_analysis(root)
        entry = next(g for g in result.domain_glossary if g.term == "invoice")
        assert entry.definition.startswith("a payment settles an open invoice")

    def test_without_docs(self, write_project):
        root = write_project(BILLING_PROJECT)
        result = run_analysis(root, include_docs=False)
        assert result.files_analyzed == 3
        for paths in result.concept_locations.values():
            assert "README.md" not in paths


class TestDomainNouns:
    """Ordinary nouns are concepts, not stop words."""

    def test_nouns_survive_scoring(self, write_project):
        root = write_project(
            {
                "a.js": (
                    "// compute the bill amount for the billing system\n"
                    "function billAmount(system, name) {}\n"
                ),
                "b.js": (
                    "// bill amount for each system name\n"
                    "function systemName(bill, amount) {}\n"
                ),
            }
        )
        result = run_analysis(root, min_term_frequency=1)
        names = {c.name for c in result.domain_concepts}
        assert {"bill", "amount", "system", "name"} <= names
        assert result.concept_locations["amount"] == ["a.js", "b.js"]


class TestDegradedInput:
    """Problems with individual files never fail the run."""

    def test_oversized_file_skipped(self, write_project):
        root = write_project({"a.js": PROCESS_A, "b.js": PROCESS_B, "big.js": "// x\n" * 400})
        result = run_analysis(root, min_term_frequency=1, max_file_size_bytes=1000)
        assert result.files_analyzed == 2
        assert any("Skipping large file" in w for w in result.warnings)

    def test_max_files(self, write_project):
        root = write_project({f"src/m{i}.js": PROCESS_B for i in range(5)})
        result = run_analysis(root, max_files=2)
        assert result.files_analyzed == 2
        assert "Limiting semantic analysis to 2 files out of 5" in result.warnings

    def test_malformed_manifest(self, write_project):
        root = write_project({"package.json": "{", "a.js": PROCESS_A, "b.js": PROCESS_B})
        result = run_analysis(root, min_term_frequency=1)
        assert result.files_analyzed == 2
        assert "transaction" in {c.name for c in result.domain_concepts}

    def test_syntax_error_uses_fallback(self, write_project):
        root = write_project(
            {"a.js": "const processTransaction = ;\n", "b.js": "function processTransaction( {\n"}
        )
        result = run_analysis(root, min_term_frequency=1)
        assert result.concept_locations["transaction"] == ["a.js", "b.js"]


class TestPublicApi:
    def test_analyze(self, write_project):
        root = write_project({"a.js": PROCESS_A, "b.js": PROCESS_B})
        result = analyze(root, min_term_frequency=1)
        assert result.domain_concepts[0].name == "transaction"

    def test_analyze_invalid_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            analyze(tmp_path / "missing")
