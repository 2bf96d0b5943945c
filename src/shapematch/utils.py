from __future__ import annotations

import enum
import numbers
from decimal import Decimal
from typing import Iterator, Optional, Tuple

from .types import (
    MISSING,
    Missing,
    ShapeKey,
    ShapeValue,
    is_atom,
    is_mapping,
    is_sequence,
)


def strict_equals(lhs: ShapeValue, rhs: ShapeValue) -> bool:
    """Equality without coercion between value kinds."""
    match (lhs, rhs):
        case (bool(), bool()):
            return lhs == rhs
        case (bool(), _) | (_, bool()):
            return False
        case (enum.Enum(), _) | (_, enum.Enum()):
            # IntEnum members are numbers too
            return lhs is rhs
        case (numbers.Number(), numbers.Number()) if _is_signalling(lhs) or _is_signalling(rhs):
            return False
        case (numbers.Number(), numbers.Number()):
            # 1 == 1.0 holds, NaN never equals itself
            return lhs == rhs
        case (str(), str()):
            return lhs == rhs
        case (bytes() | bytearray(), bytes() | bytearray()):
            return lhs == rhs
        case _:
            return lhs is rhs


def _is_signalling(value: object) -> bool:
    return isinstance(value, Decimal) and value.is_snan()


def _collides_with_bool(key: ShapeKey) -> bool:
    return isinstance(key, numbers.Number) and (key == 0 or key == 1)


def _sequence_index(key: ShapeKey) -> Optional[int]:
    match key:
        case bool():
            return None
        case int():
            return key
        case str() if key.isdigit() and key.isascii() and (key == "0" or key[0] != "0"):
            return int(key)
        case _:
            return None


def _attribute(value: object, key: ShapeKey) -> ShapeValue:
    if not isinstance(key, str):
        return MISSING

    return getattr(value, key, MISSING)


def lookup(value: object, key: ShapeKey) -> ShapeValue:
    """Read `key` from a composite, yielding MISSING when it is absent."""
    if is_mapping(value):
        try:
            if key not in value:
                return MISSING
        except TypeError:
            # unhashable key
            return MISSING

        if _collides_with_bool(key) and not any(strict_equals(stored, key) for stored in value):
            # True hashes like 1, so membership alone cannot tell them apart
            return MISSING

        return value[key]

    if is_sequence(value):
        index = _sequence_index(key)

        if index is None:
            return _attribute(value, key)

        if 0 <= index < len(value):
            return value[index]

        return MISSING

    return _attribute(value, key)


def shape_items(shape: ShapeValue) -> Iterator[Tuple[ShapeKey, ShapeValue]]:
    """Yield (key, sub-shape) for every key a shape declares."""
    if is_mapping(shape):
        yield from shape.items()
        return

    if isinstance(shape, str) or (is_sequence(shape) and not is_atom(shape)):
        yield from enumerate(shape)
        return

    if is_atom(shape):
        return

    slots = getattr(shape, "__dict__", None)

    if isinstance(slots, dict):
        yield from list(slots.items())


def is_enumerable_shape(shape: ShapeValue) -> bool:
    return shape is not None and not isinstance(shape, Missing)
