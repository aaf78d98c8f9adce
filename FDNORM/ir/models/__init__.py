"""IR (Intermediate Representation) models."""

from .dependency import (
    AttributeSet,
    RejectionReason,
    FunctionalDependency,
    AcceptedFD,
    RejectedFD,
    FDOutcome,
)
from .relational import (
    ParsedDDL,
    Relation,
    PrimaryKeyStatus,
    PrimaryKeyAssessment,
    AnalysisResult,
)

__all__ = [
    "AttributeSet",
    "RejectionReason",
    "FunctionalDependency",
    "AcceptedFD",
    "RejectedFD",
    "FDOutcome",
    "ParsedDDL",
    "Relation",
    "PrimaryKeyStatus",
    "PrimaryKeyAssessment",
    "AnalysisResult",
]
