"""Phase 3, Step 3.1: 3NF Decomposition.

Heuristic decomposition: one relation per distinct FD attribute set (lhs ∪ rhs),
plus one relation holding a candidate key when no FD relation equals a key
exactly. Every relation's primary key spans all of its attributes; this is not
a true 3NF synthesis from a minimal cover.
"""

from typing import Iterable, List, Optional, Sequence

from FDNORM.utils.logging import get_logger
from FDNORM.utils.error_handling import ErrorContext, NoCandidateKeyError
from FDNORM.utils.fd import AttributeIndex
from FDNORM.ir.models import AttributeSet, FunctionalDependency, Relation

logger = get_logger(__name__)


def group_fd_attribute_sets(fds: Iterable[FunctionalDependency]) -> List[AttributeSet]:
    """lhs ∪ rhs for each FD, deduplicated, first occurrence order."""
    groups: List[AttributeSet] = []
    for fd in fds:
        attrs = fd.lhs | fd.rhs
        if attrs not in groups:
            groups.append(attrs)
    return groups


def decompose(
    fds: Sequence[FunctionalDependency],
    candidate_keys: Sequence[AttributeSet],
    universe: Optional[Sequence[str]] = None,
) -> List[Relation]:
    """
    Decompose into relations R1..Rn, guaranteeing one relation equals a candidate key.

    Args:
        fds: Functional dependencies in input order
        candidate_keys: Minimal keys; the first one is used if a key relation must be added
        universe: Optional attribute order for columns (alphabetical otherwise)

    Returns:
        Ordered list of Relation, each keyed on all of its attributes

    Raises:
        NoCandidateKeyError: If candidate_keys is empty
    """
    if not candidate_keys:
        raise NoCandidateKeyError(
            context=ErrorContext(
                step_id="3.1",
                phase=3,
                attribute_names=list(universe or []),
                additional_context={"fd_count": len(fds)},
            )
        )

    groups = group_fd_attribute_sets(fds)

    key_covered = any(group == frozenset(key) for group in groups for key in candidate_keys)
    if not key_covered:
        key = frozenset(candidate_keys[0])
        logger.debug(f"No FD relation equals a candidate key; adding key relation {sorted(key)}")
        groups.append(key)

    index = AttributeIndex(list(universe or []))
    relations: List[Relation] = []
    for i, group in enumerate(groups, 1):
        columns = index.ordered(group)
        relations.append(Relation(name=f"R{i}", attributes=columns, primary_key=list(columns)))
    return relations


def step_3_1_3nf_decomposition(
    fds: Sequence[FunctionalDependency],
    candidate_keys: Sequence[AttributeSet],
    universe: Optional[Sequence[str]] = None,
) -> List[Relation]:
    """
    Step 3.1 (deterministic): Decompose the schema into key-preserving relations.

    Example:
        >>> fds = [FunctionalDependency(lhs={"A"}, rhs={"B"}), FunctionalDependency(lhs={"B"}, rhs={"C"})]
        >>> [r.attributes for r in step_3_1_3nf_decomposition(fds, [frozenset({"A"})], ["A", "B", "C"])]
        [['A', 'B'], ['B', 'C'], ['A']]
    """
    logger.info("Starting Step 3.1: 3NF Decomposition (deterministic)")

    relations = decompose(fds, candidate_keys, universe)

    for relation in relations:
        logger.debug(f"{relation.name}: ({', '.join(relation.attributes)})")
    logger.info(f"3NF decomposition completed: {len(relations)} relation(s)")
    return relations
