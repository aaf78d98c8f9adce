"""Phase 1, Step 1.3: Functional Dependency Validation.

The closure engine accepts any FD, so empty sides or attributes outside the
universe would silently distort closures. This step turns such FDs into
RejectedFD diagnostics before analysis.
"""

from typing import Iterable, List, Sequence, Tuple

from FDNORM.utils.logging import get_logger
from FDNORM.ir.models import AcceptedFD, FDOutcome, FunctionalDependency, RejectedFD

logger = get_logger(__name__)


def validate_fd(outcome: AcceptedFD, universe: frozenset) -> FDOutcome:
    """Check one accepted FD against the universe."""
    fd = outcome.fd
    if not fd.lhs:
        return RejectedFD(
            line_number=outcome.line_number,
            source=outcome.source or str(fd),
            reason="empty_lhs",
            detail="determinant side has no attributes",
        )
    if not fd.rhs:
        return RejectedFD(
            line_number=outcome.line_number,
            source=outcome.source or str(fd),
            reason="empty_rhs",
            detail="dependent side has no attributes",
        )
    unknown = sorted(fd.attributes - universe)
    if unknown:
        return RejectedFD(
            line_number=outcome.line_number,
            source=outcome.source or str(fd),
            reason="unknown_attribute",
            detail=f"attributes not in schema: {', '.join(unknown)}",
            offending_attributes=unknown,
        )
    return outcome


def step_1_3_fd_validation(
    outcomes: Sequence[FDOutcome],
    universe: Iterable[str],
) -> List[FDOutcome]:
    """
    Step 1.3 (deterministic): Validate parsed FDs against the attribute universe.

    Args:
        outcomes: Output of Step 1.2 (already-rejected entries pass through)
        universe: Schema attributes

    Returns:
        List of outcomes, same order, with invalid FDs converted to RejectedFD
    """
    logger.info("Starting Step 1.3: Functional Dependency Validation (deterministic)")

    universe_set = frozenset(universe)
    validated: List[FDOutcome] = []
    for outcome in outcomes:
        if isinstance(outcome, AcceptedFD):
            checked = validate_fd(outcome, universe_set)
            if isinstance(checked, RejectedFD):
                logger.warning(f"Rejected FD {checked.source!r} ({checked.reason}): {checked.detail}")
            validated.append(checked)
        else:
            validated.append(outcome)

    return validated


def split_outcomes(
    outcomes: Sequence[FDOutcome],
) -> Tuple[List[FunctionalDependency], List[RejectedFD]]:
    """Separate outcomes into the usable FD store and the rejection diagnostics."""
    fds = [o.fd for o in outcomes if isinstance(o, AcceptedFD)]
    rejected = [o for o in outcomes if isinstance(o, RejectedFD)]
    return fds, rejected
