"""Classifies values by the comparison capability they offer."""

import dataclasses
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from types import FunctionType, ModuleType, SimpleNamespace
from typing import Any, Literal

from pydantic import BaseModel

from .protocols import Comparable, Equatable
from .types import CompositeItems

ScalarFamily = Literal["number", "text", "bytes"]

_TEXT_TYPES = (str, bytes, bytearray, memoryview)
_NUMBER_TYPES = (numbers.Real, Decimal)


class ValueKind(Enum):
    """How the comparator treats a value."""

    COMPARABLE = "comparable"
    EQUATABLE = "equatable"
    SCALAR = "scalar"
    COMPOSITE = "composite"
    OPAQUE = "opaque"


def _is_record(value: Any) -> bool:
    if isinstance(value, type | FunctionType | ModuleType | Enum | BaseException):
        return False
    if dataclasses.is_dataclass(value):
        return True
    if isinstance(value, BaseModel | SimpleNamespace):
        return True
    # Objects with their own == keep it; only default equality is replaced.
    return (
        hasattr(value, "__dict__")
        and not callable(value)
        and type(value).__eq__ is object.__eq__
    )


def has_native_equality(value: Any) -> bool:
    """Check if the class of a value defines its own ``__eq__``."""
    return type(value).__eq__ is not object.__eq__


def classify(value: Any) -> ValueKind:
    """Resolve the kind of a value.

    Capabilities are probed first so that domain values can override the
    structural rules, e.g. a ``Version`` is COMPARABLE even though it also
    has attributes.

    Args:
        value: Any value.

    Returns:
        The ValueKind of the value.
    """
    if isinstance(value, type):
        return ValueKind.OPAQUE
    if isinstance(value, Comparable):
        return ValueKind.COMPARABLE
    if isinstance(value, Equatable):
        return ValueKind.EQUATABLE
    if isinstance(value, (*_NUMBER_TYPES, str, bytes, bytearray)):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.COMPOSITE
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.COMPOSITE
    if _is_record(value):
        return ValueKind.COMPOSITE
    return ValueKind.OPAQUE


def scalar_family(value: Any) -> ScalarFamily:
    """Return the family a scalar belongs to.

    Booleans belong to the number family and compare as 0 and 1.

    Raises:
        TypeError: If the value is not a scalar.
    """
    if isinstance(value, _NUMBER_TYPES):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, bytes | bytearray):
        return "bytes"
    raise TypeError(f"{type(value).__name__} is not a scalar")


def is_record(value: Any) -> bool:
    """Check if a composite value is an attribute record, not a container."""
    return (
        not isinstance(value, Mapping | Sequence)
        and classify(value) is ValueKind.COMPOSITE
    )


def composite_items(value: Any) -> CompositeItems:
    """Return the ordered (key, value) pairs of a composite value.

    Keys are stringified so that key sequences of different containers can
    be compared with each other.

    Args:
        value: A COMPOSITE value.

    Returns:
        List of (key, value) pairs in iteration order.
    """
    if isinstance(value, Mapping):
        return [(str(key), item) for key, item in value.items()]
    if isinstance(value, Sequence):
        return [(str(index), item) for index, item in enumerate(value)]
    if isinstance(value, BaseModel):
        return [
            (name, getattr(value, name)) for name in type(value).model_fields
        ]
    if dataclasses.is_dataclass(value):
        return [
            (field.name, getattr(value, field.name))
            for field in dataclasses.fields(value)
        ]
    return [(str(key), item) for key, item in vars(value).items()]
