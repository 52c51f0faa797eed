"""Scanning data models.

FileDocument is the unit the semantic engine works on: one per analyzed
file, built once by the corpus builder and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath

CODE_EXTENSIONS = frozenset({".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"})
DOCUMENTATION_EXTENSIONS = frozenset({".md", ".markdown", ".txt"})
METADATA_EXTENSIONS = frozenset({".json"})


class FileKind(Enum):
    """How a file's content is turned into text."""

    CODE = "code"
    DOCUMENTATION = "documentation"
    METADATA = "metadata"
    OTHER = "other"

    @classmethod
    def from_path(cls, path: str | PurePath) -> FileKind:
        """Classify a file by extension and name."""
        pure = PurePath(path)
        suffix = pure.suffix.lower()
        if suffix in CODE_EXTENSIONS:
            return cls.CODE
        if suffix in DOCUMENTATION_EXTENSIONS or "readme" in pure.name.lower():
            return cls.DOCUMENTATION
        if suffix in METADATA_EXTENSIONS:
            return cls.METADATA
        return cls.OTHER


@dataclass(frozen=True)
class ExtractedText:
    """Output of the text extractor for a single file's content."""

    identifiers: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    documentation: str = ""
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class FileDocument:
    """One analyzed file.

    Attributes:
        path: Project-relative POSIX path, unique within a run
        identifiers: Raw identifier tokens in source order
        comments: Raw comment strings in source order
        documentation: Raw prose for documentation files, else ""
        text: Normalized blob fed to the corpus
    """

    path: str
    identifiers: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    documentation: str = ""
    text: str = ""
    search_text: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Lowercased copy used for every concept containment check.
        object.__setattr__(self, "search_text", self.text.lower())

    @classmethod
    def from_extracted(cls, path: str, extracted: ExtractedText) -> FileDocument:
        return cls(
            path=path,
            identifiers=extracted.identifiers,
            comments=extracted.comments,
            documentation=extracted.documentation,
            text=extracted.text,
        )

    def mentions(self, term: str) -> bool:
        """Substring containment of a lowercase term in the normalized text."""
        return term in self.search_text
