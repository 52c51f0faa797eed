"""Term-frequency corpus and the builder that fills it.

Corpus is a per-run value: one instance per analysis, filled by
CorpusBuilder and read afterwards by the concept scorer.

TF-IDF used throughout:
    tf(t, d)  = raw count of t in d
    idf(t)    = 1 + ln(N / (1 + df(t)))
    tfidf     = tf * idf
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer

from ..config import SemanticConfig
from ..exceptions import ConceptMapperError, FileAccessError
from ..logging_config import get_logger
from ..scanning import DiscoveryResult, FileDocument, FileKind, TextExtractor, discover_files

logger = get_logger(__name__)

# Word characters, as in identifiers; everything else separates tokens.
TOKEN_PATTERN = r"(?u)\w+"

# Function words dropped before weighting. Content nouns ("amount", "system",
# "name") stay, so they can become concepts.
ENGLISH_STOP_WORDS = frozenset(
    {
        "about", "above", "after", "again", "all", "also", "am", "an", "and",
        "another", "any", "are", "as", "at", "be", "because", "been", "before",
        "being", "below", "between", "both", "but", "by", "came", "can",
        "cannot", "come", "could", "did", "do", "does", "doing", "during",
        "each", "few", "for", "from", "further", "get", "got", "had", "has",
        "have", "he", "her", "here", "him", "himself", "his", "how", "if", "in",
        "into", "is", "it", "its", "itself", "like", "make", "many", "me",
        "might", "more", "most", "much", "must", "my", "myself", "never", "now",
        "of", "on", "only", "or", "other", "our", "ours", "ourselves", "out",
        "over", "own", "said", "same", "see", "should", "since", "so", "some",
        "still", "such", "take", "than", "that", "the", "their", "theirs",
        "them", "themselves", "then", "there", "these", "they", "this", "those",
        "through", "to", "too", "under", "until", "up", "very", "was", "way",
        "we", "well", "were", "what", "when", "where", "which", "while", "who",
        "whom", "why", "with", "would", "you", "your", "yours", "yourself",
    }
)


@dataclass(frozen=True)
class TermWeight:
    term: str
    tfidf: float


class Corpus:
    """Documents plus lazily computed document-term counts and IDF."""

    def __init__(self) -> None:
        self._documents: list[str] = []
        self._computed = False
        self._counts = None
        self._terms: np.ndarray = np.array([], dtype=object)
        self._idf: np.ndarray = np.array([], dtype=float)
        self._term_index: dict[str, int] = {}

    def add_document(self, text: str) -> int:
        """Register a document and return its index."""
        self._documents.append(text)
        self._computed = False
        return len(self._documents) - 1

    @property
    def documents(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def _ensure_computed(self) -> None:
        if self._computed:
            return
        self._computed = True
        self._counts = None
        self._terms = np.array([], dtype=object)
        self._idf = np.array([], dtype=float)
        self._term_index = {}
        if not self._documents:
            return

        vectorizer = CountVectorizer(
            lowercase=True,
            token_pattern=TOKEN_PATTERN,
            stop_words=sorted(ENGLISH_STOP_WORDS),
        )
        try:
            counts = vectorizer.fit_transform(self._documents).tocsr()
        except ValueError:
            # Every document reduced to stop words: empty vocabulary.
            logger.debug("Corpus has an empty vocabulary")
            return

        terms = vectorizer.get_feature_names_out()
        doc_freq = np.bincount(counts.indices, minlength=len(terms))
        self._idf = 1.0 + np.log(len(self._documents) / (1.0 + doc_freq))
        self._terms = terms
        self._term_index = {term: i for i, term in enumerate(terms)}
        self._counts = counts

    def idf(self, term: str) -> float:
        """Inverse document frequency of a term (0.0 if unseen)."""
        self._ensure_computed()
        index = self._term_index.get(term)
        if index is None:
            return 0.0
        return float(self._idf[index])

    def list_terms(self, index: int, limit: Optional[int] = None) -> list[TermWeight]:
        """Terms of one document by TF-IDF weight, highest first.

        Ties are ordered by term, so the list is deterministic.
        """
        self._ensure_computed()
        if self._counts is None:
            return []

        row = self._counts.getrow(index)
        term_ids = row.indices
        weights = row.data * self._idf[term_ids]
        # Feature ids are alphabetical, so they double as the name tie-break.
        order = np.lexsort((term_ids, -weights))
        if limit is not None:
            order = order[:limit]
        return [TermWeight(str(self._terms[term_ids[i]]), float(weights[i])) for i in order]


@dataclass
class CorpusBuild:
    """Output of CorpusBuilder.build()."""

    corpus: Corpus
    documents: dict[str, FileDocument] = field(default_factory=dict)
    discovery: Optional[DiscoveryResult] = None
    warnings: list[str] = field(default_factory=list)


class CorpusBuilder:
    """Discovers files, extracts their text and fills a fresh Corpus.

    Files are processed strictly one after another in discovery order, in
    batches separated by a cooperative pause. Only the stat and read calls
    are awaited; corpus appends never interleave.
    """

    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()
        self.extractor = TextExtractor(
            include_comments=self.config.include_comments,
            include_identifiers=self.config.include_identifiers,
        )

    async def build(
        self,
        project_dir: str | Path,
        ignore_patterns: Optional[list[str]] = None,
        max_files: Optional[int] = None,
    ) -> CorpusBuild:
        """Build the corpus for a project.

        Raises:
            InvalidPathError: If the project root is invalid
        """
        patterns = [*self.config.ignore_paths, *(ignore_patterns or [])]
        limit = max_files if max_files is not None else self.config.max_files
        discovery = discover_files(project_dir, patterns, limit)

        build = CorpusBuild(corpus=Corpus(), discovery=discovery)
        build.warnings.extend(discovery.warnings)

        files = discovery.files
        batch_size = self.config.batch_size
        for start in range(0, len(files), batch_size):
            for rel_path in files[start : start + batch_size]:
                await self._process_file(discovery.root, rel_path, build)
            if start + batch_size < len(files):
                await asyncio.sleep(self.config.batch_pause_seconds)

        logger.info(
            f"Corpus built from {len(build.documents)} of {len(files)} files "
            f"({len(build.warnings)} warnings)"
        )
        return build

    async def _process_file(self, root: Path, rel_path: str, build: CorpusBuild) -> None:
        kind = FileKind.from_path(rel_path)
        if kind is FileKind.DOCUMENTATION and not self.config.include_docs:
            return

        path = root / rel_path
        try:
            size = (await asyncio.to_thread(path.stat)).st_size
            if size > self.config.max_file_size_bytes:
                self._warn(
                    build,
                    f"Skipping large file ({size / 1024 / 1024:.2f}MB): {rel_path}",
                )
                return
            content = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
        except OSError as e:
            self._warn(build, str(FileAccessError(Path(rel_path), str(e))))
            return

        try:
            extracted = self.extractor.extract(content, kind, rel_path)
        except (ConceptMapperError, ValueError) as e:
            self._warn(build, f"Error processing file {rel_path}: {e}")
            return

        if extracted.is_empty:
            return

        document = FileDocument.from_extracted(rel_path, extracted)
        build.corpus.add_document(document.text)
        build.documents[rel_path] = document

    @staticmethod
    def _warn(build: CorpusBuild, message: str) -> None:
        logger.warning(message)
        build.warnings.append(message)
