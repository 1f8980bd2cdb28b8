"""Equality and ordering capabilities values may declare."""

from abc import ABC, abstractmethod
from typing import Any, Protocol, Self, runtime_checkable

from .types import CompareResult


@runtime_checkable
class Equatable(Protocol):
    """A value that can decide whether another value is equal to it.

    Implementations must be reflexive (``x.equals(x)`` is always True) and,
    when both operands implement the capability, symmetric.
    """

    def equals(self: Self, other: Any) -> bool:
        """Return True if ``other`` is equal to this value."""
        ...


@runtime_checkable
class Comparable(Equatable, Protocol):
    """A value that declares a total order over compatible values.

    ``compare_to`` returns a negative number, zero or a positive number, or
    ``None`` when ``other`` cannot be related to this value. The generic
    comparator prefers ``compare_to`` over ``equals`` when both exist.
    """

    def compare_to(self: Self, other: Any) -> CompareResult:
        """Return the position of this value relative to ``other``."""
        ...


class ComparableMixin(ABC):
    """Base class for value objects that implement ``compare_to``.

    Derives the rich comparison operators from ``compare_to`` and exposes a
    static ``compare`` usable as a two-argument sort callback. Subclasses
    that need value equality should override ``equals`` and route
    ``__eq__`` through it.
    """

    __slots__ = ()

    def equals(self: Self, other: Any) -> bool:
        """Return True if ``other`` is equal to this value.

        Falls back to native equality.
        """
        return bool(self == other)

    @abstractmethod
    def compare_to(self: Self, other: Any) -> CompareResult:
        """Return the position of this value relative to ``other``.

        Returns:
            Negative, zero or positive, or None if ``other`` cannot be
            related to this value.
        """

    def __lt__(self: Self, other: Any) -> bool:
        result = self.compare_to(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self: Self, other: Any) -> bool:
        result = self.compare_to(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self: Self, other: Any) -> bool:
        result = self.compare_to(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self: Self, other: Any) -> bool:
        result = self.compare_to(other)
        if result is None:
            return NotImplemented
        return result >= 0

    @staticmethod
    def compare(left: Any, right: Any) -> CompareResult:
        """Compare two arbitrary values.

        Usable as a comparator callback, e.g. with ``vercmp.sort_values``
        or ``functools.cmp_to_key``.

        Args:
            left: Left operand.
            right: Right operand.

        Returns:
            Negative, zero or positive, or None if the values are
            incomparable.
        """
        from .comparator import compare  # noqa: PLC0415

        return compare(left, right)
