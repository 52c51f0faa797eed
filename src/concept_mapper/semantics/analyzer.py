"""SemanticAnalyzer - orchestrates semantic extraction for a project.

One linear pass per run, nothing cached between runs:
    Discover -> Extract (batched) -> Score -> Relate -> Glossify -> Assemble
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import SemanticConfig
from ..logging_config import get_logger
from .assembler import ResultAssembler
from .corpus import CorpusBuilder
from .glossary import GlossaryGenerator
from .models import SemanticResult
from .relationships import RelationshipDetector
from .scoring import ConceptScorer

logger = get_logger(__name__)


class SemanticAnalyzer:
    """Derives domain concepts, relationships and a glossary from a project tree.

    Each call to analyze_project() builds a fresh corpus, so one analyzer
    can be reused, and several can run in the same process.

    Usage:
        analyzer = SemanticAnalyzer(SemanticConfig(min_term_frequency=1))
        result = await analyzer.analyze_project("/path/to/project")
    """

    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()

    async def analyze_project(
        self,
        project_dir: str | Path,
        ignore_paths: Optional[list[str]] = None,
    ) -> SemanticResult:
        """Run the full pipeline.

        Raises:
            InvalidPathError: If project_dir is not an existing directory
        """
        build = await CorpusBuilder(self.config).build(project_dir, ignore_paths)
        documents = list(build.documents.values())

        concepts = ConceptScorer(self.config).score(build.corpus, documents)
        relationships = RelationshipDetector(self.config).detect(concepts, documents)
        glossary = GlossaryGenerator(self.config).generate(concepts, documents, relationships)
        result = ResultAssembler(self.config).assemble(
            concepts, glossary, relationships, build.documents, build.warnings
        )

        logger.info(
            f"SemanticAnalyzer: {len(result.domain_concepts)} concepts, "
            f"{len(relationships.pair_strengths)} relationships from "
            f"{result.files_analyzed} files"
        )
        return result
