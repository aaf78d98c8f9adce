"""Response models for API endpoints."""

from pydantic import BaseModel
from typing import List

from FDNORM.ir.models import AnalysisResult, RejectedFD


class AnalysisRunResponse(BaseModel):
    """Full analysis result plus the rendered text report."""
    status: str  # "success"
    result: AnalysisResult
    report: str


class ClosureResponse(BaseModel):
    attributes: List[str]
    closure: List[str]
    is_superkey: bool
    rejected_dependencies: List[RejectedFD] = []


class CandidateKeysResponse(BaseModel):
    candidate_keys: List[List[str]]
    prime_attributes: List[str]
    rejected_dependencies: List[RejectedFD] = []
