"""Phase 2, Step 2.2: Primary Key Assessment.

Compare the primary key stated in the DDL with the computed candidate keys.
"""

from typing import Iterable, List, Sequence

from FDNORM.utils.logging import get_logger
from FDNORM.utils.fd import is_superkey
from FDNORM.ir.models import AttributeSet, FunctionalDependency, PrimaryKeyAssessment

logger = get_logger(__name__)


def prime_attributes(candidate_keys: Iterable[AttributeSet]) -> AttributeSet:
    """Attributes that belong to at least one candidate key."""
    prime: set = set()
    for key in candidate_keys:
        prime |= key
    return frozenset(prime)


def step_2_2_primary_key_assessment(
    stated_primary_key: Sequence[str],
    universe: Sequence[str],
    fds: Sequence[FunctionalDependency],
    candidate_keys: List[AttributeSet],
) -> PrimaryKeyAssessment:
    """
    Step 2.2 (deterministic): Classify the stated primary key.

    Returns:
        PrimaryKeyAssessment with status:
            - "missing": no primary key was stated
            - "candidate_key": the stated key is one of the minimal keys
            - "superkey": it determines every attribute but is not minimal
            - "not_a_key": it names undeclared attributes, or its closure does not
              reach the whole universe
    """
    logger.info("Starting Step 2.2: Primary Key Assessment (deterministic)")

    stated = list(stated_primary_key)
    if not stated:
        assessment = PrimaryKeyAssessment(stated=[], status="missing")
    elif not set(stated) <= set(universe):
        assessment = PrimaryKeyAssessment(stated=stated, status="not_a_key")
    elif frozenset(stated) in candidate_keys:
        assessment = PrimaryKeyAssessment(stated=stated, status="candidate_key")
    elif is_superkey(stated, universe, fds):
        assessment = PrimaryKeyAssessment(stated=stated, status="superkey")
    else:
        assessment = PrimaryKeyAssessment(stated=stated, status="not_a_key")

    if assessment.status in ("superkey", "not_a_key"):
        logger.warning(
            f"Stated primary key ({', '.join(stated)}) is {assessment.status.replace('_', ' ')}"
        )
    return assessment
