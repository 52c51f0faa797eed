"""Identifier extraction strategies for source files.

Two strategies:
- StructuralExtractor: walks a tree-sitter syntax tree. Raises ParsingError
  when the source does not parse cleanly.
- PatternExtractor: declaration-keyword regexes. Always succeeds.

extract_identifiers() tries the structural strategy and falls back to the
pattern strategy on ParsingError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .treesitter_parser import TreeSitterParser, grammar_for_path

logger = get_logger(__name__)

# Leaf node types that carry a name.
IDENTIFIER_NODE_TYPES = frozenset(
    {
        "identifier",
        "property_identifier",
        "private_property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "type_identifier",
    }
)

# Declarations whose name is recorded in addition to the name leaf itself,
# mapped to the grammar field holding that name.
DECLARATION_NAME_FIELDS = {
    "function_declaration": "name",
    "generator_function_declaration": "name",
    "class_declaration": "name",
    "abstract_class_declaration": "name",
    "method_definition": "name",
    "field_definition": "property",
    "public_field_definition": "name",
}

_VARIABLE_RE = re.compile(r"(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")
_FUNCTION_RE = re.compile(r"function\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")
_CLASS_RE = re.compile(r"class\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")


def _node_name(node) -> str:
    text = node.text.decode("utf-8", errors="replace") if node.text else ""
    return text.lstrip("#")


@dataclass
class StructuralExtractor:
    """Collects identifier names from a tree-sitter syntax tree."""

    parser: TreeSitterParser = field(default_factory=TreeSitterParser)

    def extract(self, content: str, path: str) -> list[str]:
        """Return identifier names in document order.

        Raises:
            ParsingError: If the grammar is unavailable or the tree has errors
        """
        language = grammar_for_path(path)
        tree = self.parser.parse(content.encode("utf-8"), language)
        if tree is None:
            raise ParsingError(Path(path), language, "no grammar available")
        if tree.root_node.has_error:
            raise ParsingError(Path(path), language, "syntax error in source")

        identifiers: list[str] = []
        for node in self.parser.walk(tree):
            if node.type in IDENTIFIER_NODE_TYPES:
                name = _node_name(node)
                if name:
                    identifiers.append(name)
                continue

            name_field = DECLARATION_NAME_FIELDS.get(node.type)
            if name_field is not None:
                name_node = node.child_by_field_name(name_field)
                if name_node is not None and name_node.type in IDENTIFIER_NODE_TYPES:
                    identifiers.append(_node_name(name_node))
        return identifiers


class PatternExtractor:
    """Regex scan for variable, function and class declarations."""

    def extract(self, content: str) -> list[str]:
        identifiers: list[str] = []
        for pattern in (_VARIABLE_RE, _FUNCTION_RE, _CLASS_RE):
            identifiers.extend(match.group(1) for match in pattern.finditer(content))
        return identifiers


def extract_identifiers(
    content: str,
    path: str,
    structural: Optional[StructuralExtractor] = None,
    pattern: Optional[PatternExtractor] = None,
) -> tuple[list[str], bool]:
    """Extract identifiers, degrading to regex extraction on parse failure.

    Returns:
        (identifiers, used_fallback)
    """
    structural = structural or StructuralExtractor()
    pattern = pattern or PatternExtractor()
    try:
        return structural.extract(content, path), False
    except ParsingError as e:
        logger.debug(f"{e}; falling back to pattern extraction")
        return pattern.extract(content), True
