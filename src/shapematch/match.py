"""
Structural shape matching

A shape is a nested mapping of keys to sub-shapes or terminal values:
- Atom inputs (None, MISSING, bools, numbers, strings, ...) compare strictly
  against the shape
- Composite inputs are checked key by key: every key the shape declares must
  match recursively, extra input keys are ignored
- A key the input lacks reads as MISSING
"""

from __future__ import annotations

from .types import ShapeValue, is_atom
from .utils import is_enumerable_shape, lookup, shape_items, strict_equals


def matches(value: ShapeValue, shape: ShapeValue) -> bool:
    """
    Structural match: does `value` have `shape`?

    Rules:
    1. If value is an atom, compare with strict_equals
    2. If shape is None or MISSING, a composite value never matches
    3. Otherwise every (key, sub-shape) of shape must match lookup(value, key)
    """
    if is_atom(value):
        return strict_equals(value, shape)

    if not is_enumerable_shape(shape):
        return False

    for key, sub_shape in shape_items(shape):
        if not matches(lookup(value, key), sub_shape):
            return False

    return True


has_shape = matches
