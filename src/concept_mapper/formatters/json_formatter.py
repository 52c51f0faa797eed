"""JSON formatter for Concept Mapper."""

import json

from ..semantics import SemanticResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render results as the camelCase exchange structure."""

    def render(self, result: SemanticResult) -> None:
        print(self.format(result))

    def format(self, result: SemanticResult) -> str:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
