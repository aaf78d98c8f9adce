"""Functional-dependency primitives: closure, attribute interning, FD line grammar."""

from .closure import closure, is_superkey, AttributeIndex
from .grammar import FD_SEPARATOR, parse_fd_expression

__all__ = [
    "closure",
    "is_superkey",
    "AttributeIndex",
    "FD_SEPARATOR",
    "parse_fd_expression",
]
