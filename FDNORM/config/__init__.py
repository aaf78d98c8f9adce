"""Configuration loading for FDNORM."""

from .loader import (
    AnalysisSettings,
    find_config_file,
    load_config,
    get_config,
    get_analysis_settings,
)

__all__ = [
    "AnalysisSettings",
    "find_config_file",
    "load_config",
    "get_config",
    "get_analysis_settings",
]
