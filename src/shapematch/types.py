from __future__ import annotations

import enum
import numbers
import types as _types
from collections.abc import Mapping, Sequence
from typing import Any, Tuple

from typing_extensions import TypeAlias, TypeGuard

# ---------- Value Model ----------

class Missing:
    """Absence marker: the value found at a key a composite does not have."""

    _instance: 'Missing | None' = None

    def __new__(cls) -> 'Missing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> 'Missing':
        return self

    def __deepcopy__(self, memo: dict) -> 'Missing':
        return self

    def __reduce__(self) -> str:
        return "MISSING"

MISSING = Missing()

ShapeValue: TypeAlias = Any
Composite: TypeAlias = Any
ShapeKey: TypeAlias = Any

_TEXT_TYPES: Tuple[type, ...] = (str, bytes, bytearray)

_CALLABLE_ATOM_TYPES: Tuple[type, ...] = (
    _types.FunctionType,
    _types.BuiltinFunctionType,
    _types.MethodType,
    _types.BuiltinMethodType,
    type,
)

_ATOM_TYPES: Tuple[type, ...] = (
    type(None),
    Missing,
    bool,
    numbers.Number,
    enum.Enum,
) + _TEXT_TYPES + _CALLABLE_ATOM_TYPES

def is_atom(value: object) -> bool:
    return isinstance(value, _ATOM_TYPES)

def is_composite(value: object) -> TypeGuard[Composite]:
    """Anything that is not an atom supports keyed lookup."""
    return not is_atom(value)

def is_mapping(value: object) -> TypeGuard[Mapping]:
    return isinstance(value, Mapping)

def is_sequence(value: object) -> TypeGuard[Sequence]:
    return isinstance(value, Sequence)
