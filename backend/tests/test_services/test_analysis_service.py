"""Tests for AnalysisService."""

import pytest
from backend.services.analysis_service import AnalysisService
from FDNORM.config import AnalysisSettings
from FDNORM.utils.error_handling import AttributeLimitExceededError, NoCandidateKeyError


@pytest.mark.asyncio
async def test_run(analysis_service, sample_ddl, sample_fds):
    """Test running the full pipeline through the service."""
    response = await analysis_service.run(sample_ddl, sample_fds)

    assert response.status == "success"
    assert response.result.prime_attributes == ["StudentID", "SectionID", "CourseID", "Term"]
    assert response.report.startswith("Parsed Attributes:")


@pytest.mark.asyncio
async def test_run_without_key(analysis_service):
    with pytest.raises(NoCandidateKeyError):
        await analysis_service.run("CREATE TABLE t ()", [])


@pytest.mark.asyncio
async def test_closure_ignores_blank_lines(analysis_service):
    response = await analysis_service.closure(["A", "B", "C"], ["", "A->B", "  "], ["A"])

    assert response.closure == ["A", "B"]
    assert response.is_superkey is False
    assert response.rejected_dependencies == []


@pytest.mark.asyncio
async def test_closure_of_empty_universe(analysis_service):
    response = await analysis_service.closure([], [], [])
    assert response.closure == []
    assert response.is_superkey is False


@pytest.mark.asyncio
async def test_candidate_keys(analysis_service):
    response = await analysis_service.candidate_keys(["A", "B"], ["A->B", "B->A"])

    assert response.candidate_keys == [["A"], ["B"]]
    assert response.prime_attributes == ["A", "B"]


@pytest.mark.asyncio
async def test_candidate_keys_rejections(analysis_service):
    response = await analysis_service.candidate_keys(["A", "B"], ["A->", "A->B"])

    assert response.candidate_keys == [["A"]]
    assert [r.reason for r in response.rejected_dependencies] == ["empty_rhs"]


@pytest.mark.asyncio
async def test_candidate_keys_limit():
    service = AnalysisService(settings=AnalysisSettings(max_attributes=1))
    with pytest.raises(AttributeLimitExceededError):
        await service.candidate_keys(["A", "B"], [])


def test_settings_loaded_lazily():
    service = AnalysisService()
    assert service.settings.max_attributes >= 1


@pytest.mark.asyncio
async def test_fd_lines_follow_run_conventions(analysis_service):
    """Comment lines are skipped and END stops reading, as in /run."""
    lines = ["# keys for the toy table", "A->B", "END", "B->C"]

    closure_response = await analysis_service.closure(["A", "B", "C"], lines, ["A"])
    keys_response = await analysis_service.candidate_keys(["A", "B", "C"], lines)

    assert closure_response.closure == ["A", "B"]
    assert closure_response.rejected_dependencies == []
    assert keys_response.candidate_keys == [["A", "C"]]
    assert keys_response.rejected_dependencies == []
