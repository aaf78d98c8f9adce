"""Pydantic models for functional dependencies and their parse outcomes.

FunctionalDependency is the record every analysis step consumes. Parsing and
validation never raise on a bad FD line; they produce a tagged outcome instead
(AcceptedFD or RejectedFD, discriminated on `status`).
"""

from __future__ import annotations

from typing import Annotated, FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

AttributeSet = FrozenSet[str]

RejectionReason = Literal[
    "missing_separator",
    "syntax_error",
    "empty_lhs",
    "empty_rhs",
    "unknown_attribute",
]


class FunctionalDependency(BaseModel):
    """lhs -> rhs over attribute names. Sides are not checked for emptiness here."""
    lhs: FrozenSet[str] = Field(default_factory=frozenset)
    rhs: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    @property
    def attributes(self) -> AttributeSet:
        return self.lhs | self.rhs

    def __str__(self) -> str:
        return f"{','.join(sorted(self.lhs))}->{','.join(sorted(self.rhs))}"


class AcceptedFD(BaseModel):
    status: Literal["accepted"] = "accepted"
    line_number: Optional[int] = None
    source: str = ""
    fd: FunctionalDependency


class RejectedFD(BaseModel):
    status: Literal["rejected"] = "rejected"
    line_number: Optional[int] = None
    source: str = ""
    reason: RejectionReason
    detail: str = ""
    offending_attributes: List[str] = Field(default_factory=list)


FDOutcome = Annotated[Union[AcceptedFD, RejectedFD], Field(discriminator="status")]
