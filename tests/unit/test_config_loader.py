"""Tests for analysis config loading."""

from pathlib import Path

import pytest

from scaledtest.flaky_analysis.config_loader import load_analysis_config
from scaledtest.flaky_analysis.models.analysis_config import AnalysisConfig


def test_load_analysis_config_defaults() -> None:
    """load_analysis_config returns defaults without a path."""
    assert load_analysis_config(None) == AnalysisConfig()


def test_load_analysis_config_valid(tmp_path: Path) -> None:
    """load_analysis_config parses a YAML file."""
    config_file = tmp_path / "analysis.yaml"
    config_file.write_text(
        """
limit: 5
include_non_flaky: false
error_limit: null
"""
    )

    config = load_analysis_config(config_file)

    assert config.limit == 5
    assert config.include_non_flaky is False
    assert config.error_limit is None


def test_load_analysis_config_empty_file(tmp_path: Path) -> None:
    """An empty config file yields defaults."""
    config_file = tmp_path / "analysis.yaml"
    config_file.write_text("")

    assert load_analysis_config(config_file) == AnalysisConfig()


def test_load_analysis_config_file_not_found(tmp_path: Path) -> None:
    """load_analysis_config raises FileNotFoundError for a missing file."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_analysis_config(tmp_path / "missing.yaml")


def test_load_analysis_config_invalid_yaml(tmp_path: Path) -> None:
    """load_analysis_config raises ValueError for invalid YAML."""
    config_file = tmp_path / "analysis.yaml"
    config_file.write_text("invalid: yaml: content: [")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_analysis_config(config_file)


def test_load_analysis_config_invalid_schema(tmp_path: Path) -> None:
    """load_analysis_config raises ValueError for schema violations."""
    config_file = tmp_path / "analysis.yaml"
    config_file.write_text("limit: 0\n")

    with pytest.raises(ValueError, match="Invalid analysis config schema"):
        load_analysis_config(config_file)
