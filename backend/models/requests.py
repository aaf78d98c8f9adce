"""Request models for API endpoints."""

from pydantic import BaseModel, Field
from typing import List


class AnalysisRunRequest(BaseModel):
    """Request to run the full analysis for one table."""
    ddl: str = Field(..., min_length=1, description="CREATE TABLE statement")
    fds: List[str] = Field(default_factory=list, description="Functional dependency lines, e.g. 'A,B->C'")


class ClosureRequest(BaseModel):
    """Request to compute an attribute closure."""
    universe: List[str] = Field(default_factory=list, description="Schema attributes")
    fds: List[str] = Field(default_factory=list, description="Functional dependency lines")
    attributes: List[str] = Field(default_factory=list, description="Attributes to close over")


class CandidateKeysRequest(BaseModel):
    """Request to enumerate candidate keys."""
    universe: List[str] = Field(default_factory=list, description="Schema attributes in declaration order")
    fds: List[str] = Field(default_factory=list, description="Functional dependency lines")
