"""Identifier segmentation and lightweight comment scanning."""

from __future__ import annotations

import re

# `// line` comments and `/* block */` or `/** doc */` comments.
_COMMENT_RE = re.compile(r"//(.+?)$|/\*\*?([\s\S]*?)\*/", re.MULTILINE)

_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[_\-$]+")


def split_identifier(name: str) -> list[str]:
    """Split a camelCase, PascalCase, snake_case or kebab-case name into lowercase words.

    >>> split_identifier("transformDataPoint")
    ['transform', 'data', 'point']
    >>> split_identifier("HTTPRequest_handler")
    ['http', 'request', 'handler']
    """
    spaced = _SEPARATOR_RE.sub(" ", name)
    spaced = _LOWER_UPPER_RE.sub(r"\1 \2", spaced)
    spaced = _ACRONYM_RE.sub(r"\1 \2", spaced)
    return [part.lower() for part in spaced.split() if part]


def identifier_words(name: str) -> str:
    """Corpus text for one identifier: the fused form, then its split words.

    Both are kept so that single-token and decomposed matches work.

    >>> identifier_words("calculateFee")
    'calculatefee calculate fee'
    >>> identifier_words("amount")
    'amount'
    """
    words = split_identifier(name)
    fused = "".join(words)
    if not fused:
        return ""
    if len(words) == 1:
        return fused
    return " ".join([fused, *words])


def extract_comments(content: str) -> list[str]:
    """Return trimmed, non-empty comment bodies in source order.

    This is a pattern pass, not a tokenizer: comment markers inside string
    literals are picked up too.
    """
    comments = []
    for match in _COMMENT_RE.finditer(content):
        body = match.group(1) if match.group(1) is not None else match.group(2)
        body = (body or "").strip()
        if body:
            comments.append(body)
    return comments
