"""
structtraverse.kinds — Nominal kinds of runtime values.

A *kind descriptor* is either a ValueKind member or a Python class:

    is_instance_of(42, ValueKind.NUMERIC)     → True
    is_instance_of(True, ValueKind.NUMERIC)   → False
    is_instance_of([], ValueKind.SEQUENCE)    → True
    is_instance_of(Point(1, 2), Point)        → True

Primitive kinds (numeric, boolean, string) are matched on the EXACT
runtime type, never through subclassing.  In Python, bool is a subclass
of int, and IntEnum members are ints too; without the exact match a
`True` would pass as a number.
"""

from collections.abc import Mapping
from enum import Enum, auto
from typing import Any, Union


class ValueKind(Enum):
    """Built-in kinds of tree data."""
    NUMERIC = auto()     # int or float (not bool)
    BOOLEAN = auto()     # bool
    STRING = auto()      # str
    SEQUENCE = auto()    # list
    OBJECT = auto()      # plain mapping: dict, string keys
    MAP = auto()         # associative map: any other Mapping, any keys


KindDescriptor = Union[ValueKind, type]

# Classes that are matched by exact type rather than isinstance().
_EXACT_TYPES = (int, float, bool, str)

_NUMERIC_TYPES = (int, float)


def is_valid_kind(kind: Any) -> bool:
    """True if `kind` can be used as a kind descriptor."""
    return isinstance(kind, (ValueKind, type))


def is_instance_of(value: Any, kind: KindDescriptor) -> bool:
    """Check whether `value` is of the given kind."""
    if isinstance(kind, ValueKind):
        if kind is ValueKind.NUMERIC:
            return type(value) in _NUMERIC_TYPES
        if kind is ValueKind.BOOLEAN:
            return type(value) is bool
        if kind is ValueKind.STRING:
            return type(value) is str
        if kind is ValueKind.SEQUENCE:
            return isinstance(value, list)
        if kind is ValueKind.OBJECT:
            return isinstance(value, dict)
        if kind is ValueKind.MAP:
            return isinstance(value, Mapping) and not isinstance(value, dict)
        raise ValueError(f"Unknown value kind: {kind!r}")

    if kind in _EXACT_TYPES:
        return type(value) is kind
    return isinstance(value, kind)


def kind_of(value: Any) -> KindDescriptor:
    """
    The kind descriptor of `value`.

    Primitives map onto their ValueKind (so ints and floats share
    NUMERIC); everything else is described by its own class.
    """
    if type(value) in _NUMERIC_TYPES:
        return ValueKind.NUMERIC
    if type(value) is bool:
        return ValueKind.BOOLEAN
    if type(value) is str:
        return ValueKind.STRING
    return type(value)


def is_same_type(a: Any, b: Any) -> bool:
    """
    Whether two values are of the same kind, for comparisons.

        is_same_type(3, 2.5)      → True
        is_same_type(True, 1)     → False
        is_same_type(None, 0)     → False
        is_same_type(None, None)  → True
    """
    if (a is None) != (b is None):
        return False
    if a is None:
        return True
    return is_instance_of(a, kind_of(b))
