"""Base formatter interface for Concept Mapper output rendering."""

from abc import ABC, abstractmethod

from ..semantics import SemanticResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: SemanticResult) -> None:
        """Render a result to the terminal."""

    @abstractmethod
    def format(self, result: SemanticResult) -> str:
        """Return formatted string representation of a result."""
