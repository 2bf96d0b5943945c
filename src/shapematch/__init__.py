"""Recursive structural shape matching for plain Python values."""

from .match import has_shape, matches
from .types import MISSING, Missing, is_atom, is_composite
from .utils import lookup, shape_items, strict_equals

__all__ = [
    "MISSING",
    "Missing",
    "has_shape",
    "is_atom",
    "is_composite",
    "lookup",
    "matches",
    "shape_items",
    "strict_equals",
]
