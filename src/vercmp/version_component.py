"""Optional numeric component of a version (build or revision)."""

import re
from dataclasses import dataclass
from typing import Any, Self, TypeAlias

from .exceptions import ParseError
from .protocols import ComparableMixin
from .types import CompareResult

_DIGITS = re.compile(r"[0-9]+")

ComponentInput: TypeAlias = "int | str | VersionComponent | None"


@dataclass(frozen=True, eq=False, slots=True)
class VersionComponent(ComparableMixin):
    """A non-negative integer component that may be left undefined.

    Undefined is distinct from zero: an undefined component sorts before
    every defined one, including ``0``, and renders as an empty string.

    Attributes:
        value: The component value, or None when undefined.
    """

    value: int | None = None

    @classmethod
    def parse(cls, value: ComponentInput) -> "VersionComponent":
        """Build a component from an integer, a digit string or None.

        Args:
            value: An existing component (returned unchanged), None or a
                blank string (undefined), a non-negative int, or a string of
                decimal digits.

        Returns:
            The parsed component.

        Raises:
            ParseError: If the value is negative, non-numeric or of an
                unsupported type.
        """
        if isinstance(value, VersionComponent):
            return value
        if value is None:
            return cls()
        if isinstance(value, bool):
            raise ParseError(value, "booleans are not version components")
        if isinstance(value, int):
            if value < 0:
                raise ParseError(value, "version components must not be negative")
            return cls(value)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return cls()
            if not _DIGITS.fullmatch(text):
                raise ParseError(value, "expected a non-negative decimal integer")
            return cls(int(text))
        raise ParseError(
            value, f"unsupported component type {type(value).__name__}"
        )

    @property
    def defined(self: Self) -> bool:
        """Whether the component carries a value."""
        return self.value is not None

    @property
    def int_value(self: Self) -> int:
        """The component value, with undefined read as 0."""
        return 0 if self.value is None else self.value

    @staticmethod
    def compare(left: Any, right: Any) -> int:  # type: ignore[override]
        """Compare two components.

        Args:
            left: Left component (or anything ``parse`` accepts).
            right: Right component (or anything ``parse`` accepts).

        Returns:
            -1, 0 or 1. Undefined sorts before defined and two undefined
            components are equal.
        """
        a = VersionComponent.parse(left)
        b = VersionComponent.parse(right)
        if a.value is None or b.value is None:
            return int(b.value is None) - int(a.value is None)
        return (a.value > b.value) - (a.value < b.value)

    def compare_to(self: Self, other: Any) -> CompareResult:
        """Compare against another component, or None if not a component."""
        if not isinstance(other, VersionComponent):
            return None
        return VersionComponent.compare(self, other)

    def equals(self: Self, other: Any) -> bool:
        """Return True if ``other`` is a component with the same state."""
        return self.compare_to(other) == 0

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, VersionComponent):
            return NotImplemented
        return self.equals(other)

    def __hash__(self: Self) -> int:
        return hash((VersionComponent, self.value))

    def __str__(self: Self) -> str:
        return "" if self.value is None else str(self.value)

    def __repr__(self: Self) -> str:
        return f"VersionComponent({self.value!r})"
