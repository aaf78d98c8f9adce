"""FDNORM: functional-dependency analysis, candidate keys and naive 3NF decomposition."""

__version__ = "0.1.0"
