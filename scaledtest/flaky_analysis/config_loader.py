"""Load analysis configuration from YAML files."""

from pathlib import Path

import yaml

from scaledtest.flaky_analysis.models.analysis_config import AnalysisConfig


def load_analysis_config(config_path: Path | None) -> AnalysisConfig:
    """Load analysis configuration, falling back to defaults.

    Args:
        config_path: Path to a YAML config file, or None for defaults

    Returns:
        Parsed configuration

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema

    """
    if config_path is None:
        return AnalysisConfig()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return AnalysisConfig()

    try:
        return AnalysisConfig.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid analysis config schema in {config_path}: {e}") from e
