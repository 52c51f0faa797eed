"""Exception hierarchy for Concept Mapper."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
)
from .base import ConceptMapperError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "ConceptMapperError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
