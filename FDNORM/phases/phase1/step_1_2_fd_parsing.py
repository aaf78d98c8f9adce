"""Phase 1, Step 1.2: Functional Dependency Parsing.

Turn FD text (one `lhs->rhs` per line, optionally terminated by END) into
tagged outcomes. A malformed line never aborts parsing; it becomes a
RejectedFD carrying the reason.
"""

from typing import Iterable, List, Optional, Union

from lark import UnexpectedInput

from FDNORM.utils.logging import get_logger
from FDNORM.utils.fd import FD_SEPARATOR, parse_fd_expression
from FDNORM.ir.models import AcceptedFD, FDOutcome, FunctionalDependency, RejectedFD

logger = get_logger(__name__)

END_MARKER = "END"


def _iter_lines(fd_text: Union[str, Iterable[str]]) -> Iterable[str]:
    if isinstance(fd_text, str):
        return fd_text.splitlines()
    return fd_text


def parse_fd_line(line: str, line_number: Optional[int] = None) -> FDOutcome:
    """Parse a single FD line into an AcceptedFD or RejectedFD."""
    source = line.strip()

    if FD_SEPARATOR not in source:
        return RejectedFD(
            line_number=line_number,
            source=source,
            reason="missing_separator",
            detail=f"expected '{FD_SEPARATOR}' between determinant and dependent attributes",
        )

    try:
        lhs, rhs = parse_fd_expression(source)
    except UnexpectedInput as e:
        return RejectedFD(
            line_number=line_number,
            source=source,
            reason="syntax_error",
            detail=str(e).strip().splitlines()[0] if str(e).strip() else type(e).__name__,
        )

    return AcceptedFD(
        line_number=line_number,
        source=source,
        fd=FunctionalDependency(lhs=frozenset(lhs), rhs=frozenset(rhs)),
    )


def step_1_2_fd_parsing(fd_text: Union[str, Iterable[str]]) -> List[FDOutcome]:
    """
    Step 1.2 (deterministic): Parse functional dependency lines.

    Blank lines and lines starting with '#' are skipped. A line reading END
    stops parsing; anything after it is ignored.

    Args:
        fd_text: Multi-line string or iterable of lines

    Returns:
        List of AcceptedFD / RejectedFD outcomes in input order
    """
    logger.info("Starting Step 1.2: Functional Dependency Parsing (deterministic)")

    outcomes: List[FDOutcome] = []
    for line_number, raw in enumerate(_iter_lines(fd_text), 1):
        line = raw.strip()
        if line == END_MARKER:
            break
        if not line or line.startswith("#"):
            continue

        outcome = parse_fd_line(line, line_number)
        if isinstance(outcome, RejectedFD):
            logger.warning(
                f"Rejected FD line {line_number} ({outcome.reason}): {outcome.source!r}"
            )
        else:
            logger.debug(f"Parsed FD line {line_number}: {outcome.fd}")
        outcomes.append(outcome)

    accepted = sum(1 for o in outcomes if isinstance(o, AcceptedFD))
    logger.info(
        f"FD parsing completed: {accepted} accepted, {len(outcomes) - accepted} rejected"
    )
    return outcomes
