"""Configuration settings for the backend API."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Ignore extra environment variables
    )

    # API
    api_title: str = "FDNORM Backend API"
    api_version: str = "0.1.0"
    # Can be overridden via env var: CORS_ORIGINS='["http://localhost:5173"]'
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Analysis overrides; None falls back to FDNORM/config/config.yaml
    analysis_max_attributes: Optional[int] = None
    analysis_max_workers: Optional[int] = None
    analysis_column_type: Optional[str] = None


settings = Settings()
