"""Tests for configuration loading."""

from pathlib import Path

import pytest

from concept_mapper.config import ScoringConfig, SemanticConfig, load_config
from concept_mapper.exceptions import ConfigurationError, InvalidConfigError


class TestDefaults:
    def test_semantic_defaults(self):
        config = SemanticConfig()
        assert config.include_comments is True
        assert config.include_docs is True
        assert config.include_identifiers is True
        assert config.min_term_frequency == 2
        assert config.max_terms == 100
        assert config.max_files == 1000
        assert config.max_file_size_bytes == 1024 * 1024
        assert config.batch_size == 20
        assert config.glossary_limit == 100

    def test_scoring_defaults(self):
        scoring = ScoringConfig()
        assert scoring.tfidf_scale == 10
        assert scoring.common_term_weight_bar == 7.0
        assert scoring.ngram_bonus == 5
        assert scoring.min_relationship_strength == 2
        assert scoring.max_related_concepts == 5
        assert scoring.graph_node_limit == 20
        assert scoring.fallback_definition == "A key concept in this project"

    def test_glossary_limit_override(self):
        assert SemanticConfig(max_glossary_entries=10).glossary_limit == 10


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_term_frequency": -1},
            {"max_terms": 0},
            {"max_files": 0},
            {"max_file_size_bytes": 0},
            {"batch_size": 0},
            {"batch_pause_seconds": -0.5},
            {"max_glossary_entries": -1},
        ],
    )
    def test_invalid_semantic_values(self, kwargs):
        with pytest.raises(InvalidConfigError):
            SemanticConfig(**kwargs)

    def test_invalid_scoring_values(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            ScoringConfig(graph_node_limit=0)
        assert exc_info.value.details["key"] == "graph_node_limit"


class TestLoadConfig:
    """Test merge order and sources."""

    def test_defaults(self):
        assert load_config() == SemanticConfig()

    def test_overrides_ignore_none(self):
        config = load_config(max_terms=50, max_files=None)
        assert config.max_terms == 50
        assert config.max_files == 1000

    def test_project_file(self):
        Path("concept-mapper.toml").write_text("max_terms = 40\n")
        assert load_config().max_terms == 40

    def test_global_file_below_project_file(self):
        (Path.home() / ".concept-mapper.toml").write_text("max_terms = 30\nmax_files = 10\n")
        Path("concept-mapper.toml").write_text("max_terms = 40\n")
        config = load_config()
        assert config.max_terms == 40
        assert config.max_files == 10

    def test_explicit_file_and_scoring_table(self, tmp_path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            'ignore_paths = ["**/fixtures/**"]\n\n[scoring]\nngram_bonus = 3\n'
        )
        config = load_config(config_file=config_file)
        assert config.ignore_paths == ["**/fixtures/**"]
        assert config.scoring.ngram_bonus == 3
        assert config.scoring.tfidf_scale == 10

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(config_file=tmp_path / "absent.toml")

    def test_malformed_file(self, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("max_terms = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=config_file)

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "unknown.toml"
        config_file.write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=config_file)

    def test_unknown_scoring_key(self, tmp_path):
        config_file = tmp_path / "unknown.toml"
        config_file.write_text("[scoring]\nsmoothing = 2\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=config_file)


class TestEnvironment:
    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("CONCEPT_MAPPER_MAX_FILES", "200")
        monkeypatch.setenv("CONCEPT_MAPPER_INCLUDE_DOCS", "false")
        monkeypatch.setenv("CONCEPT_MAPPER_BATCH_PAUSE_SECONDS", "0.01")
        config = load_config()
        assert config.max_files == 200
        assert config.include_docs is False
        assert config.batch_pause_seconds == 0.01

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("CONCEPT_MAPPER_MAX_TERMS", "20")
        assert load_config(max_terms=5).max_terms == 5

    def test_optional_int(self, monkeypatch):
        monkeypatch.setenv("CONCEPT_MAPPER_MAX_GLOSSARY_ENTRIES", "7")
        assert load_config().glossary_limit == 7

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("CONCEPT_MAPPER_MAX_FILES", "many")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_bad_bool(self, monkeypatch):
        monkeypatch.setenv("CONCEPT_MAPPER_INCLUDE_COMMENTS", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()
