"""Configuration loading and management for Concept Mapper.

Configuration sources are merged in priority order:
    1. Defaults (defined in SemanticConfig)
    2. Global config (~/.concept-mapper.toml)
    3. Project config (./concept-mapper.toml)
    4. Explicit config file
    5. Environment variables (CONCEPT_MAPPER_* prefix)
    6. Keyword overrides (CLI flags, API callers)

Example:
    >>> config = load_config(min_term_frequency=1, max_terms=50)
    >>> config.max_terms
    50
    >>> config.scoring.ngram_bonus
    5
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

ENV_PREFIX = "CONCEPT_MAPPER_"


@dataclass(frozen=True)
class ScoringConfig:
    """Heuristic tuning knobs for concept scoring and graph construction.

    The defaults keep concept frequencies comparable between runs and
    across tools that consume the output, so changing them shifts every
    score and threshold downstream.

    Attributes:
        Term scoring:
            tfidf_scale: Multiplier applied to a TF-IDF weight before rounding
            common_term_weight_bar: Common programming words below this
                TF-IDF weight are not accepted as new concepts
            min_token_length: Shorter tokens are never concepts

        N-gram mining:
            ngram_bonus: Flat frequency added per accepted n-gram occurrence
            min_ngram_documents: Distinct documents an n-gram must appear in
                when its words are not already concepts

        Relationships:
            min_relationship_strength: Files two concepts must share
            max_related_concepts: Partners kept per concept

        Reporting:
            graph_node_limit: Concepts kept as conceptual-model nodes
            substantial_context_margin: A glossary context must be longer
                than the term by more than this many characters
            fallback_definition: Definition used when no context qualifies
    """

    tfidf_scale: int = 10
    common_term_weight_bar: float = 7.0
    min_token_length: int = 3

    ngram_bonus: int = 5
    min_ngram_documents: int = 2

    min_relationship_strength: int = 2
    max_related_concepts: int = 5

    graph_node_limit: int = 20
    substantial_context_margin: int = 10
    fallback_definition: str = "A key concept in this project"

    def __post_init__(self) -> None:
        """Validate scoring configuration."""
        positive = [
            "tfidf_scale",
            "min_token_length",
            "min_ngram_documents",
            "min_relationship_strength",
            "max_related_concepts",
            "graph_node_limit",
        ]
        for field_name in positive:
            value = getattr(self, field_name)
            if value < 1:
                raise InvalidConfigError(field_name, value, "must be at least 1")

        if self.ngram_bonus < 0:
            raise InvalidConfigError("ngram_bonus", self.ngram_bonus, "must be non-negative")
        if self.common_term_weight_bar < 0:
            raise InvalidConfigError(
                "common_term_weight_bar", self.common_term_weight_bar, "must be non-negative"
            )
        if self.substantial_context_margin < 0:
            raise InvalidConfigError(
                "substantial_context_margin",
                self.substantial_context_margin,
                "must be non-negative",
            )


@dataclass(frozen=True)
class SemanticConfig:
    """Configuration for one semantic analysis run.

    Attributes:
        Text sources:
            include_comments: Feed comment text into the corpus
            include_docs: Analyze prose documentation files (markdown, README)
            include_identifiers: Feed segmented identifier words into the corpus

        Concept selection:
            min_term_frequency: Minimum accumulated score for a retained concept
            max_terms: Per-document term cap and size of the reported concept list
            max_glossary_entries: Glossary size (None = max_terms)

        File selection:
            ignore_paths: Extra glob patterns excluded from discovery
            max_files: Hard cap on analyzed files
            max_file_size_bytes: Files above this size are skipped

        Batching:
            batch_size: Files processed between cooperative pauses
            batch_pause_seconds: Length of the pause (0 = just yield)
    """

    include_comments: bool = True
    include_docs: bool = True
    include_identifiers: bool = True

    min_term_frequency: int = 2
    max_terms: int = 100
    max_glossary_entries: Optional[int] = None

    ignore_paths: list[str] = field(default_factory=list)
    max_files: int = 1000
    max_file_size_bytes: int = 1024 * 1024

    batch_size: int = 20
    batch_pause_seconds: float = 0.0

    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.min_term_frequency < 0:
            raise InvalidConfigError(
                "min_term_frequency", self.min_term_frequency, "must be non-negative"
            )
        if self.max_terms < 1:
            raise InvalidConfigError("max_terms", self.max_terms, "must be at least 1")
        if self.max_glossary_entries is not None and self.max_glossary_entries < 0:
            raise InvalidConfigError(
                "max_glossary_entries", self.max_glossary_entries, "must be non-negative"
            )
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.max_file_size_bytes <= 0:
            raise InvalidConfigError(
                "max_file_size_bytes", self.max_file_size_bytes, "must be positive"
            )
        if self.batch_size < 1:
            raise InvalidConfigError("batch_size", self.batch_size, "must be at least 1")
        if self.batch_pause_seconds < 0:
            raise InvalidConfigError(
                "batch_pause_seconds", self.batch_pause_seconds, "must be non-negative"
            )

    @property
    def glossary_limit(self) -> int:
        """Number of glossary entries to generate."""
        if self.max_glossary_entries is None:
            return self.max_terms
        return self.max_glossary_entries


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> SemanticConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated SemanticConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or has
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".concept-mapper.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "concept-mapper.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    scoring = merged.pop("scoring", None)
    if isinstance(scoring, dict):
        try:
            merged["scoring"] = ScoringConfig(**scoring)
        except TypeError as e:
            raise ConfigurationError(f"Invalid [scoring] config: {e}")
    elif isinstance(scoring, ScoringConfig):
        merged["scoring"] = scoring

    try:
        return SemanticConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CONCEPT_MAPPER_* environment variables.

    Every scalar SemanticConfig field can be set this way, e.g.
    CONCEPT_MAPPER_MAX_FILES=200 or CONCEPT_MAPPER_INCLUDE_DOCS=false.
    List fields and the nested scoring table are file-only.
    """
    type_hints = get_type_hints(SemanticConfig)
    result: dict[str, Any] = {}

    for field_name in SemanticConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
