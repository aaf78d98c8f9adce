"""Pydantic models for parsed DDL, decomposed relations and the full analysis result."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .dependency import AttributeSet, FunctionalDependency, RejectedFD


class ParsedDDL(BaseModel):
    table_name: Optional[str] = None
    attributes: List[str] = Field(default_factory=list)  # declaration order
    primary_key: List[str] = Field(default_factory=list)

    @property
    def universe(self) -> AttributeSet:
        return frozenset(self.attributes)


class Relation(BaseModel):
    """One decomposed table. primary_key spans every attribute."""
    name: str
    attributes: List[str] = Field(default_factory=list)
    primary_key: List[str] = Field(default_factory=list)

    @property
    def attribute_set(self) -> AttributeSet:
        return frozenset(self.attributes)


PrimaryKeyStatus = Literal["candidate_key", "superkey", "not_a_key", "missing"]


class PrimaryKeyAssessment(BaseModel):
    stated: List[str] = Field(default_factory=list)
    status: PrimaryKeyStatus = "missing"


class AnalysisResult(BaseModel):
    ddl: ParsedDDL
    functional_dependencies: List[FunctionalDependency] = Field(default_factory=list)
    rejected_dependencies: List[RejectedFD] = Field(default_factory=list)
    candidate_keys: List[List[str]] = Field(default_factory=list)
    prime_attributes: List[str] = Field(default_factory=list)
    primary_key_assessment: PrimaryKeyAssessment = Field(default_factory=PrimaryKeyAssessment)
    relations: List[Relation] = Field(default_factory=list)
    ddl_statements: List[str] = Field(default_factory=list)
