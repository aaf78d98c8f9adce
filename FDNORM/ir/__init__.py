"""Intermediate Representation (IR) models."""

from .models import (
    AttributeSet,
    FunctionalDependency,
    AcceptedFD,
    RejectedFD,
    FDOutcome,
    ParsedDDL,
    Relation,
    PrimaryKeyAssessment,
    AnalysisResult,
)

__all__ = [
    "AttributeSet",
    "FunctionalDependency",
    "AcceptedFD",
    "RejectedFD",
    "FDOutcome",
    "ParsedDDL",
    "Relation",
    "PrimaryKeyAssessment",
    "AnalysisResult",
]
