"""Shared fixtures for Concept Mapper tests."""

import asyncio
import os
from pathlib import Path

import pytest

from concept_mapper.config import SemanticConfig
from concept_mapper.scanning import FileDocument
from concept_mapper.semantics import Corpus, SemanticAnalyzer


def make_doc(path="doc.js", text="", comments=(), documentation="", identifiers=()):
    """Helper to create a FileDocument."""
    return FileDocument(
        path=path,
        identifiers=tuple(identifiers),
        comments=tuple(comments),
        documentation=documentation,
        text=text,
    )


def make_corpus(documents):
    """Helper to fill a Corpus from FileDocuments."""
    corpus = Corpus()
    for doc in documents:
        corpus.add_document(doc.text)
    return corpus


def run_analysis(root, **options):
    """Run the full pipeline synchronously."""
    config = SemanticConfig(**options)
    return asyncio.run(SemanticAnalyzer(config).analyze_project(root))


@pytest.fixture
def write_project(tmp_path):
    """Write a {relative_path: content} mapping under tmp_path."""

    def _write(files: dict) -> Path:
        for rel_path, content in files.items():
            target = tmp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user and project TOML files and CONCEPT_MAPPER_* vars out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)

    for key in list(os.environ):
        if key.startswith("CONCEPT_MAPPER_"):
            monkeypatch.delenv(key)
