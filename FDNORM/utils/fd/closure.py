"""Attribute closure under a set of functional dependencies.

Two forms are provided:
- `closure()` works on frozensets of attribute names and accepts any input,
  including attributes that are not part of the schema.
- `AttributeIndex` interns attribute names to bit positions so that hot loops
  (candidate-key enumeration) can compute closures over integer masks.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from FDNORM.ir.models import AttributeSet, FunctionalDependency


def closure(attrs: Iterable[str], fds: Sequence[FunctionalDependency]) -> AttributeSet:
    """
    Compute the closure of `attrs` under `fds` by fixpoint iteration.

    Each pass applies every FD whose lhs is contained in the running result.
    Iteration stops after a full pass that adds nothing.

    Example:
        >>> fds = [FunctionalDependency(lhs={"A"}, rhs={"B"}), FunctionalDependency(lhs={"B"}, rhs={"C"})]
        >>> sorted(closure({"A"}, fds))
        ['A', 'B', 'C']
    """
    result = set(attrs)
    changed = True
    while changed:
        changed = False
        for fd in fds:
            if fd.lhs <= result and not fd.rhs <= result:
                result |= fd.rhs
                changed = True
    return frozenset(result)


def is_superkey(
    attrs: Iterable[str],
    universe: Iterable[str],
    fds: Sequence[FunctionalDependency],
) -> bool:
    """True if the closure of `attrs` covers the whole universe."""
    return frozenset(universe) <= closure(attrs, fds)


class AttributeIndex:
    """Stable attribute -> bit position mapping.

    Universe attributes occupy bits 0..n-1 in the given order; attributes that
    only appear in FDs are appended after them so out-of-universe closures stay
    representable.
    """

    def __init__(self, universe: Sequence[str], fds: Sequence[FunctionalDependency] = ()):
        self.names: List[str] = []
        self._positions: Dict[str, int] = {}
        for name in universe:
            self._intern(name)
        self.universe_size = len(self.names)
        for fd in fds:
            for name in sorted(fd.attributes):
                self._intern(name)
        self.compiled_fds: List[Tuple[int, int]] = [
            (self.mask(fd.lhs), self.mask(fd.rhs)) for fd in fds
        ]

    def _intern(self, name: str) -> None:
        if name not in self._positions:
            self._positions[name] = len(self.names)
            self.names.append(name)

    @property
    def universe_mask(self) -> int:
        return (1 << self.universe_size) - 1

    def mask(self, attrs: Iterable[str]) -> int:
        m = 0
        for name in attrs:
            m |= 1 << self._positions[name]
        return m

    def attributes(self, mask: int) -> AttributeSet:
        return frozenset(name for i, name in enumerate(self.names) if mask >> i & 1)

    def ordered(self, attrs: Iterable[str]) -> List[str]:
        """Order attribute names by interned position; unknown names sort last, alphabetically."""
        attrs = list(attrs)
        known = [a for a in attrs if a in self._positions]
        unknown = sorted(a for a in attrs if a not in self._positions)
        return sorted(known, key=self._positions.__getitem__) + unknown

    def closure_mask(self, mask: int) -> int:
        """Bitmask form of `closure()` over the compiled FDs."""
        result = mask
        changed = True
        while changed:
            changed = False
            for lhs, rhs in self.compiled_fds:
                if lhs & result == lhs and rhs & result != rhs:
                    result |= rhs
                    changed = True
        return result
