"""
Concept Mapper - domain vocabulary extraction for source trees.

Reads a project's identifiers, comments and documentation and derives the
domain concepts it talks about, how they co-occur, and a glossary of
definitions found in the project's own prose.
"""

__version__ = "0.1.0"

from .api import analyze, analyze_async
from .config import ScoringConfig, SemanticConfig, load_config
from .semantics import SemanticAnalyzer, SemanticResult

__all__ = [
    "analyze",  # Main entry point
    "analyze_async",
    "SemanticAnalyzer",  # Direct pipeline access
    "SemanticResult",
    "SemanticConfig",
    "ScoringConfig",
    "load_config",
]
