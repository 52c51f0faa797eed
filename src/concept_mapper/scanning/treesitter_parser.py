"""Tree-sitter parser wrapper for the JavaScript family of grammars.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "typescript")
    for node in parser.walk(tree):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import PurePath
from typing import Any

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

# Extension -> grammar name. JSX is part of the JavaScript grammar.
_GRAMMAR_BY_EXTENSION = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

_LANGUAGE_FACTORIES = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}


def grammar_for_path(path: str | PurePath) -> str:
    """Return the grammar name for a source path (JavaScript by default)."""
    return _GRAMMAR_BY_EXTENSION.get(PurePath(path).suffix.lower(), "javascript")


def get_supported_languages() -> list[str]:
    """Get list of grammar names this parser can load."""
    return list(_LANGUAGE_FACTORIES)


class TreeSitterParser:
    """Wrapper around tree-sitter with lazily built per-grammar parsers."""

    def __init__(self) -> None:
        self._parsers: dict[str, Any] = {}

    def _parser_for(self, language: str) -> Any:
        parser = self._parsers.get(language)
        if parser is None:
            factory = _LANGUAGE_FACTORIES.get(language)
            if factory is None:
                return None
            lang_obj = tree_sitter.Language(factory())
            parser = tree_sitter.Parser(lang_obj)
            self._parsers[language] = parser
        return parser

    def parse(self, code: bytes, language: str) -> Any:
        """Parse code and return the syntax tree.

        Returns:
            Tree object, or None if the language is not supported
        """
        parser = self._parser_for(language)
        if parser is None:
            return None
        return parser.parse(code)

    def walk(self, tree: Any) -> Iterator[Any]:
        """Yield every node of a tree in pre-order (document order)."""
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
