"""Phase 2, Step 2.1: Candidate Key Enumeration.

Exhaustive search for minimal candidate keys. Subsets are visited level by
level in non-decreasing size, so a subset can only be accepted after every
smaller key has been seen; any superset of an accepted key is pruned before
its closure is computed. Within a level, closure tests are independent and
may be fanned out over a thread pool.
"""

from concurrent.futures import ThreadPoolExecutor
from itertools import combinations
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from FDNORM.utils.logging import get_logger
from FDNORM.utils.error_handling import AttributeLimitExceededError, ErrorContext
from FDNORM.utils.fd import AttributeIndex
from FDNORM.config import AnalysisSettings, get_analysis_settings
from FDNORM.ir.models import AttributeSet, FunctionalDependency

logger = get_logger(__name__)


def ordered_universe(universe: Iterable[str]) -> List[str]:
    """Stable attribute order: declaration order for sequences, sorted for sets."""
    if isinstance(universe, (set, frozenset)):
        return sorted(universe)
    ordered: List[str] = []
    for name in universe:
        if name not in ordered:
            ordered.append(name)
    return ordered


def iter_masks_by_size(n: int, size: int) -> Iterator[int]:
    """All n-bit masks with exactly `size` bits set, in lexicographic index order."""
    for combo in combinations(range(n), size):
        mask = 0
        for i in combo:
            mask |= 1 << i
        yield mask


def _enumerate_key_masks(
    index: AttributeIndex,
    map_fn: Callable,
) -> List[int]:
    n = index.universe_size
    target = index.universe_mask
    key_masks: List[int] = []

    for size in range(1, n + 1):
        candidates = [
            m for m in iter_masks_by_size(n, size)
            if not any(k & m == k for k in key_masks)
        ]
        if not candidates:
            # Every subset of this size already contains a key, so every larger one does too
            break

        closures = list(map_fn(index.closure_mask, candidates))
        level_keys = [m for m, c in zip(candidates, closures) if c & target == target]

        # Same-size keys cannot contain one another; filtering against earlier levels suffices
        key_masks.extend(level_keys)
        logger.debug(
            f"Key search level {size}: tested {len(candidates)} subsets, accepted {len(level_keys)}"
        )

    return key_masks


def find_candidate_keys(
    universe: Iterable[str],
    fds: Sequence[FunctionalDependency],
    max_attributes: Optional[int] = None,
    max_workers: int = 1,
) -> List[AttributeSet]:
    """
    Enumerate all minimal candidate keys of `universe` under `fds`.

    Args:
        universe: Schema attributes (sequence order is kept for tie-breaking)
        fds: Functional dependencies; not validated here
        max_attributes: Refuse universes larger than this (None = no limit)
        max_workers: Threads used per cardinality level (1 = sequential)

    Returns:
        Minimal keys ordered by size, then by attribute order. Empty for an empty universe.

    Raises:
        AttributeLimitExceededError: If the universe exceeds max_attributes

    Example:
        >>> fds = [FunctionalDependency(lhs={"A"}, rhs={"B"}), FunctionalDependency(lhs={"B"}, rhs={"C"})]
        >>> [sorted(k) for k in find_candidate_keys(["A", "B", "C"], fds)]
        [['A']]
    """
    attrs = ordered_universe(universe)
    n = len(attrs)

    if max_attributes is not None and n > max_attributes:
        raise AttributeLimitExceededError(
            context=ErrorContext(step_id="2.1", phase=2, attribute_names=attrs),
            attribute_count=n,
            limit=max_attributes,
        )

    index = AttributeIndex(attrs, fds)

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            key_masks = _enumerate_key_masks(index, executor.map)
    else:
        key_masks = _enumerate_key_masks(index, map)

    return [index.attributes(m) for m in key_masks]


def step_2_1_candidate_key_enumeration(
    universe: Sequence[str],
    fds: Sequence[FunctionalDependency],
    settings: Optional[AnalysisSettings] = None,
) -> List[AttributeSet]:
    """
    Step 2.1 (deterministic): Find minimal candidate keys, honouring configured limits.

    Args:
        universe: Schema attributes in declaration order
        fds: Validated functional dependencies
        settings: Analysis settings; loaded from config.yaml when omitted

    Returns:
        List of minimal candidate keys
    """
    settings = settings or get_analysis_settings()
    logger.info(
        f"Starting Step 2.1: Candidate Key Enumeration (deterministic) - "
        f"{len(universe)} attributes, {len(fds)} FDs, workers={settings.max_workers}"
    )

    keys = find_candidate_keys(
        universe,
        fds,
        max_attributes=settings.max_attributes,
        max_workers=settings.max_workers,
    )

    order = ordered_universe(universe)
    logger.info(
        f"Candidate key enumeration completed: {len(keys)} key(s) "
        + "; ".join("{" + ", ".join(a for a in order if a in k) + "}" for k in keys)
    )
    return keys
