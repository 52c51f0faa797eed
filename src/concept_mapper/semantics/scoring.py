"""Concept scoring: TF-IDF term selection plus multi-word phrase mining.

A term's frequency is a heuristic score, accumulated across documents:
    + round(tfidf * tfidf_scale)   each time it is a top term of a document
    + ngram_bonus                  each time an accepted phrase occurs
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from typing import Optional

from ..config import SemanticConfig
from ..logging_config import get_logger
from ..scanning import FileDocument
from .corpus import TOKEN_PATTERN, Corpus
from .models import Concept

logger = get_logger(__name__)

# Generic programming vocabulary. Only accepted when its weight is unusually
# high for a document.
COMMON_PROGRAMMING_TERMS = frozenset(
    {
        "function",
        "method",
        "class",
        "object",
        "array",
        "string",
        "number",
        "boolean",
        "null",
        "undefined",
        "async",
        "await",
        "promise",
        "const",
        "let",
        "var",
        "import",
        "export",
        "default",
        "return",
        "true",
        "false",
        "require",
        "module",
        "console",
        "log",
        "error",
        "debug",
        "info",
        "warn",
        "prototype",
        "constructor",
        "callback",
        "parameter",
        "argument",
        "property",
        "component",
        "props",
        "state",
        "render",
        "handler",
        "event",
    }
)

# Phrases containing any of these are never concepts.
NGRAM_STOPWORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "with",
        "by",
        "of",
        "from",
        "as",
        "if",
        "is",
        "are",
        "am",
        "was",
        "were",
        "be",
        "been",
    }
)

_TOKEN_RE = re.compile(TOKEN_PATTERN)
_NUMERIC_RE = re.compile(r"[0-9]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def is_common_programming_term(term: str) -> bool:
    return term.lower() in COMMON_PROGRAMMING_TERMS


def ngrams(tokens: Sequence[str], n: int) -> Iterable[tuple[str, ...]]:
    """Contiguous n-token windows."""
    return zip(*(tokens[i:] for i in range(n)))


class ConceptScorer:
    """Scores candidate concepts over a filled corpus."""

    def __init__(self, config: Optional[SemanticConfig] = None) -> None:
        self.config = config or SemanticConfig()
        self.scoring = self.config.scoring
        # Working set: accepted term -> accumulated score, in discovery order.
        self.frequencies: dict[str, int] = {}

    def score(self, corpus: Corpus, documents: Sequence[FileDocument]) -> list[Concept]:
        """Return retained concepts, highest frequency first.

        Ties keep discovery order. An empty corpus yields an empty list.
        """
        self.frequencies = {}
        self._score_terms(corpus)
        self._mine_ngrams(documents)

        threshold = self.config.min_term_frequency
        retained = [term for term, freq in self.frequencies.items() if freq >= threshold]
        retained.sort(key=lambda term: -self.frequencies[term])

        logger.debug(
            f"Scored {len(self.frequencies)} candidate terms, {len(retained)} retained"
        )
        return [Concept(name=term, frequency=self.frequencies[term]) for term in retained]

    def _accepts(self, term: str, tfidf: float) -> bool:
        if len(term) < self.scoring.min_token_length:
            return False
        if _NUMERIC_RE.fullmatch(term):
            return False
        if is_common_programming_term(term) and tfidf < self.scoring.common_term_weight_bar:
            return False
        return True

    def _score_terms(self, corpus: Corpus) -> None:
        for index in range(len(corpus)):
            for weight in corpus.list_terms(index, self.config.max_terms):
                if not self._accepts(weight.term, weight.tfidf):
                    continue
                self.frequencies[weight.term] = self.frequencies.get(
                    weight.term, 0
                ) + round_half_up(weight.tfidf * self.scoring.tfidf_scale)

    def _mine_ngrams(self, documents: Sequence[FileDocument]) -> None:
        all_text = " ".join(doc.text for doc in documents).lower()
        tokens = _TOKEN_RE.findall(all_text)

        significance: dict[str, bool] = {}
        for n in (2, 3):
            for gram in ngrams(tokens, n):
                phrase = " ".join(gram)
                significant = significance.get(phrase)
                if significant is None:
                    significant = self._is_significant(gram, phrase, documents)
                    significance[phrase] = significant
                if significant:
                    self.frequencies[phrase] = (
                        self.frequencies.get(phrase, 0) + self.scoring.ngram_bonus
                    )

    def _is_significant(
        self,
        gram: tuple[str, ...],
        phrase: str,
        documents: Sequence[FileDocument],
    ) -> bool:
        if any(token in NGRAM_STOPWORDS for token in gram):
            return False

        # Every word already a concept. The phrase itself need not recur.
        if all(self.frequencies.get(token, 0) > 1 for token in gram):
            return True

        needed = self.scoring.min_ngram_documents
        count = 0
        for doc in documents:
            if doc.mentions(phrase):
                count += 1
                if count >= needed:
                    return True
        return False
