"""Pytest fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient
from backend.main import app
from backend.services.analysis_service import AnalysisService
from FDNORM.config import AnalysisSettings


@pytest.fixture
def client():
    """Test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def analysis_settings():
    """Explicit settings so tests do not depend on config.yaml or env."""
    return AnalysisSettings(max_attributes=20, max_workers=1, column_type="VARCHAR(255)")


@pytest.fixture
def analysis_service(analysis_settings):
    """AnalysisService instance for testing."""
    return AnalysisService(settings=analysis_settings)


@pytest.fixture
def sample_ddl():
    """Sample CREATE TABLE statement for testing."""
    return (
        "CREATE TABLE Enrollment (\n"
        "    StudentID INT,\n"
        "    SectionID INT,\n"
        "    CourseID INT,\n"
        "    Term VARCHAR(10),\n"
        "    Grade CHAR(2),\n"
        "    PRIMARY KEY (StudentID, SectionID)\n"
        ");"
    )


@pytest.fixture
def sample_fds():
    """FD lines matching sample_ddl."""
    return [
        "SectionID->CourseID,Term",
        "CourseID,Term->SectionID",
        "StudentID,SectionID->Grade",
    ]
