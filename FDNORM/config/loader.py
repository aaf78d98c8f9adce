"""Load configuration from YAML file."""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class AnalysisSettings(BaseModel):
    """Typed view of the `analysis` config section."""
    max_attributes: int = Field(20, ge=1)
    max_workers: int = Field(1, ge=1)
    column_type: str = "VARCHAR(255)"

    model_config = {"extra": "ignore"}


def find_config_file() -> Path:
    """Find config.yaml file in config directory."""
    config_dir = Path(__file__).parent
    config_file = config_dir / "config.yaml"

    if not config_file.exists():
        raise FileNotFoundError(
            f"config.yaml not found at {config_file}. "
            f"Please create the configuration file."
        )

    return config_file


def load_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        config_file: Optional explicit path; defaults to the bundled config.yaml

    Returns:
        dict: Configuration dictionary

    Raises:
        FileNotFoundError: If config.yaml is not found
        yaml.YAMLError: If YAML parsing fails
    """
    config_file = config_file or find_config_file()

    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    return config or {}


def get_config(section: Optional[str] = None) -> Any:
    """
    Get configuration value(s).

    Args:
        section: Optional section name (e.g., "analysis", "logging")
                 If None, returns entire config

    Returns:
        Configuration value or dictionary
    """
    config = load_config()

    if section is None:
        return config

    return config.get(section, {})


def get_analysis_settings(**overrides: Any) -> AnalysisSettings:
    """Build AnalysisSettings from config.yaml, with non-None keyword overrides applied."""
    values = dict(get_config("analysis") or {})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return AnalysisSettings.model_validate(values)
