"""File discovery and per-file text extraction.

Usage:
    from concept_mapper.scanning import FileKind, TextExtractor, discover_files

    found = discover_files("/path/to/project", max_files=500)
    extractor = TextExtractor()
    extracted = extractor.extract(content, FileKind.from_path(path), path)
"""

from .discovery import (
    DEFAULT_IGNORE_PATTERNS,
    DiscoveryResult,
    discover_files,
    is_ignored,
    resolve_root,
)
from .extractors import PatternExtractor, StructuralExtractor, extract_identifiers
from .identifiers import extract_comments, identifier_words, split_identifier
from .models import ExtractedText, FileDocument, FileKind
from .text_extractor import TextExtractor

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "DiscoveryResult",
    "ExtractedText",
    "FileDocument",
    "FileKind",
    "PatternExtractor",
    "StructuralExtractor",
    "TextExtractor",
    "discover_files",
    "extract_comments",
    "extract_identifiers",
    "identifier_words",
    "is_ignored",
    "resolve_root",
    "split_identifier",
]
