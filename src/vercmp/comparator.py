"""Generic comparison of arbitrary, possibly heterogeneous values."""

import functools
import logging
from collections.abc import Iterable
from typing import Any, Final

from ._type_inspector import (
    ValueKind,
    classify,
    composite_items,
    has_native_equality,
    is_record,
    scalar_family,
)
from .exceptions import ComparisonDepthError
from .types import Comparator, CompareResult, SortKey

logger = logging.getLogger(__name__)

INCOMPARABLE: Final = None
DEFAULT_MAX_DEPTH: Final = 256


def _sign(result: Any) -> CompareResult:
    if result is None or result is NotImplemented:
        return INCOMPARABLE
    if result != result:  # NaN
        return INCOMPARABLE
    return (result > 0) - (result < 0)


def _compare_numbers(left: Any, right: Any) -> CompareResult:
    if left != left or right != right:  # NaN on either side
        return INCOMPARABLE
    try:
        return (left > right) - (left < right)
    except TypeError:
        return INCOMPARABLE


def _compare_ordinal(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _compare_sequences(left: list[str], right: list[str]) -> int:
    for a, b in zip(left, right, strict=False):
        result = _compare_ordinal(a, b)
        if result:
            return result
    return _compare_ordinal(len(left), len(right))


def _compare_capable(
    left: Any, right: Any, left_kind: ValueKind, right_kind: ValueKind
) -> CompareResult:
    if left_kind is ValueKind.COMPARABLE:
        result = _sign(left.compare_to(right))
        if result is not None:
            return result
    if right_kind is ValueKind.COMPARABLE:
        result = _sign(right.compare_to(left))
        if result is not None:
            return -result
    if equals(left, right):
        return 0
    logger.debug(
        "No ordering between %s and %s", type(left).__name__, type(right).__name__
    )
    return INCOMPARABLE


def _compare_composites(
    left: Any, right: Any, depth: int, max_depth: int
) -> CompareResult:
    if depth >= max_depth:
        raise ComparisonDepthError(max_depth)

    left_items = composite_items(left)
    right_items = composite_items(right)

    result = _compare_sequences(
        [key for key, _ in left_items], [key for key, _ in right_items]
    )
    if result:
        return result

    for (_, a), (_, b) in zip(left_items, right_items, strict=True):
        result = _compare(a, b, depth + 1, max_depth)
        if result != 0:
            return result
    return 0


def _compare(left: Any, right: Any, depth: int, max_depth: int) -> CompareResult:
    if left is right:
        return 0

    left_kind = classify(left)
    right_kind = classify(right)
    capable = (ValueKind.COMPARABLE, ValueKind.EQUATABLE)

    if left_kind in capable or right_kind in capable:
        return _compare_capable(left, right, left_kind, right_kind)

    if left_kind is ValueKind.COMPOSITE and right_kind is ValueKind.COMPOSITE:
        if is_record(left) or is_record(right):
            if type(left) is type(right):
                return _compare_composites(left, right, depth, max_depth)
        else:
            return _compare_composites(left, right, depth, max_depth)

    if left_kind is ValueKind.SCALAR and right_kind is ValueKind.SCALAR:
        family = scalar_family(left)
        if family == scalar_family(right):
            if family == "number":
                return _compare_numbers(left, right)
            return _compare_ordinal(left, right)

    if left == right:
        return 0
    logger.debug(
        "Treating %s and %s as incomparable",
        type(left).__name__,
        type(right).__name__,
    )
    return INCOMPARABLE


def compare(
    left: Any, right: Any, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> CompareResult:
    """Compare two values of any shape.

    The first applicable rule decides:

    1. The same object is equal to itself.
    2. A value exposing ``compare_to`` (or only ``equals``) decides for
       itself; ``right`` is consulted with the sign reversed when ``left``
       cannot answer.
    3. Two mappings, sequences or records of the same class are compared
       by their key sequence first, then by their values in key order.
    4. Numbers (booleans count as 0/1), strings and bytes of the same
       family are compared numerically or ordinally.
    5. Anything else is equal if ``==`` says so and incomparable otherwise.

    Args:
        left: Left operand.
        right: Right operand.
        max_depth: Maximum nesting level explored in composite values.

    Returns:
        -1, 0 or 1, or None (``INCOMPARABLE``) if the values cannot be
        ordered relative to each other.

    Raises:
        ComparisonDepthError: If composite values nest deeper than
            ``max_depth``, which includes self-referencing containers, or
            deeper than the interpreter stack allows.

    Example:
        >>> compare({"a": 1, "b": 2}, {"a": 1, "b": 2})
        0
        >>> compare(["x", "y"], ["x"])
        1
        >>> compare(1, "1") is None
        True
    """
    try:
        return _compare(left, right, 0, max_depth)
    except ComparisonDepthError:
        raise
    except RecursionError as e:
        # The interpreter stack ran out before max_depth was reached.
        raise ComparisonDepthError(max_depth) from e


def equals(left: Any, right: Any) -> bool:
    """Decide whether two values are equal.

    A value's own ``equals`` capability takes precedence over structural
    comparison and native equality.

    Args:
        left: Left operand.
        right: Right operand.

    Returns:
        True if the values are equal.
    """
    if left is right:
        return True

    left_kind = classify(left)
    if left_kind in (ValueKind.COMPARABLE, ValueKind.EQUATABLE):
        return bool(left.equals(right))
    right_kind = classify(right)
    if right_kind in (ValueKind.COMPARABLE, ValueKind.EQUATABLE):
        return bool(right.equals(left))
    if left_kind is ValueKind.COMPOSITE and right_kind is ValueKind.COMPOSITE:
        if is_record(left) and has_native_equality(left):
            return bool(left == right)
        return compare(left, right) == 0
    return bool(left == right)


def sort_key(comparator: Comparator = compare) -> SortKey:
    """Turn a two-argument comparator into a ``key=`` callable.

    An incomparable result is treated as equal for ordering purposes, so
    the relative order of such values is left as it was.

    Args:
        comparator: Function returning a signed int or None.

    Returns:
        A key function for ``sorted`` and ``list.sort``.
    """

    def _total(left: Any, right: Any) -> int:
        return comparator(left, right) or 0

    return functools.cmp_to_key(_total)


def sort_values(
    values: Iterable[Any],
    comparator: Comparator = compare,
    *,
    reverse: bool = False,
) -> list[Any]:
    """Return the values sorted with ``comparator``.

    The sort is stable and tolerates incomparable pairs.

    Example:
        >>> sort_values([3, 1, 2])
        [1, 2, 3]
    """
    return sorted(values, key=sort_key(comparator), reverse=reverse)
