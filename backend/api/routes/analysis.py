"""Analysis endpoints."""

import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.models.requests import AnalysisRunRequest, CandidateKeysRequest, ClosureRequest
from backend.models.responses import AnalysisRunResponse, CandidateKeysResponse, ClosureResponse
from backend.dependencies import get_analysis_service
from backend.services.analysis_service import AnalysisService
from FDNORM.utils.error_handling import StepError, handle_step_error

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/analysis", tags=["analysis"])


def _unprocessable(error: StepError) -> HTTPException:
    response = handle_step_error(error, log_level="warning")
    detail = response["error"]
    detail.pop("traceback", None)
    return HTTPException(status_code=422, detail=detail)


@router.post("/run", response_model=AnalysisRunResponse)
async def run_analysis(
    request: AnalysisRunRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """
    Run the full analysis: parse DDL and FDs, find candidate keys, decompose, compile DDL.

    Malformed FD lines do not fail the request; they come back in
    result.rejected_dependencies.
    """
    logger.info(f"API ENDPOINT: POST /api/analysis/run ({len(request.fds)} FD line(s))")
    try:
        return await analysis_service.run(request.ddl, request.fds)
    except StepError as e:
        raise _unprocessable(e)


@router.post("/closure", response_model=ClosureResponse)
async def compute_closure(
    request: ClosureRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """Compute the closure of an attribute set."""
    logger.info(f"API ENDPOINT: POST /api/analysis/closure ({len(request.attributes)} attribute(s))")
    return await analysis_service.closure(request.universe, request.fds, request.attributes)


@router.post("/keys", response_model=CandidateKeysResponse)
async def compute_candidate_keys(
    request: CandidateKeysRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """Enumerate minimal candidate keys."""
    logger.info(f"API ENDPOINT: POST /api/analysis/keys ({len(request.universe)} attribute(s))")
    try:
        return await analysis_service.candidate_keys(request.universe, request.fds)
    except StepError as e:
        raise _unprocessable(e)
