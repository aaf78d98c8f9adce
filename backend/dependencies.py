"""FastAPI dependencies - process-wide singletons."""

from functools import lru_cache

from backend.config import settings
from backend.services.analysis_service import AnalysisService
from FDNORM.config import get_analysis_settings


@lru_cache(maxsize=1)
def get_analysis_service() -> AnalysisService:
    """Singleton AnalysisService configured from config.yaml plus env overrides."""
    return AnalysisService(
        settings=get_analysis_settings(
            max_attributes=settings.analysis_max_attributes,
            max_workers=settings.analysis_max_workers,
            column_type=settings.analysis_column_type,
        )
    )
