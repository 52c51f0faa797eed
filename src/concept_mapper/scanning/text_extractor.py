"""Turns one file's content into identifiers, comments and corpus text."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .extractors import PatternExtractor, StructuralExtractor, extract_identifiers
from .identifiers import extract_comments, identifier_words
from .models import ExtractedText, FileKind

logger = get_logger(__name__)

DEPENDENCY_FIELDS = ("dependencies", "devDependencies", "peerDependencies")


@dataclass
class TextExtractor:
    """Per-file text extraction. Holds no state shared between files."""

    include_comments: bool = True
    include_identifiers: bool = True
    structural: StructuralExtractor = field(default_factory=StructuralExtractor)
    pattern: PatternExtractor = field(default_factory=PatternExtractor)

    def extract(self, content: str, kind: FileKind, path: str = "") -> ExtractedText:
        """Extract text for a file of the given kind.

        Raises:
            ParsingError: If a metadata file is not valid JSON
        """
        if kind is FileKind.CODE:
            return self._extract_code(content, path)
        if kind is FileKind.DOCUMENTATION:
            return ExtractedText(documentation=content, text=content)
        if kind is FileKind.METADATA:
            return self._extract_metadata(content, path)
        return ExtractedText()

    def _extract_code(self, content: str, path: str) -> ExtractedText:
        comments = extract_comments(content)
        identifiers, used_fallback = extract_identifiers(
            content, path, self.structural, self.pattern
        )
        if used_fallback:
            logger.debug(f"{path}: used pattern extraction for identifiers")

        parts = []
        if self.include_comments:
            parts.append(" ".join(comments))
        if self.include_identifiers:
            parts.append(" ".join(identifier_words(name) for name in identifiers))

        return ExtractedText(
            identifiers=tuple(identifiers),
            comments=tuple(comments),
            text=" ".join(parts),
        )

    def _extract_metadata(self, content: str, path: str) -> ExtractedText:
        try:
            manifest: Any = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParsingError(Path(path), "json", str(e))
        if not isinstance(manifest, dict):
            return ExtractedText()

        text_parts: list[str] = []
        identifiers: list[str] = []

        for key in ("name", "description"):
            value = manifest.get(key)
            if isinstance(value, str) and value:
                text_parts.append(value)

        keywords = manifest.get("keywords")
        if isinstance(keywords, list):
            text_parts.append(" ".join(str(k) for k in keywords))

        scripts = manifest.get("scripts")
        if isinstance(scripts, dict):
            for script_name in scripts:
                identifiers.append(script_name)
                text_parts.append(script_name)

        for dep_field in DEPENDENCY_FIELDS:
            deps = manifest.get(dep_field)
            if isinstance(deps, dict):
                identifiers.extend(deps)

        return ExtractedText(identifiers=tuple(identifiers), text=" ".join(text_parts))
