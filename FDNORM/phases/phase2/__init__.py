"""Phase 2: Key Analysis."""

from .step_2_1_candidate_key_enumeration import (
    find_candidate_keys,
    ordered_universe,
    iter_masks_by_size,
    step_2_1_candidate_key_enumeration,
)
from .step_2_2_primary_key_assessment import (
    prime_attributes,
    step_2_2_primary_key_assessment,
)

__all__ = [
    "find_candidate_keys",
    "ordered_universe",
    "iter_masks_by_size",
    "step_2_1_candidate_key_enumeration",
    "prime_attributes",
    "step_2_2_primary_key_assessment",
]
