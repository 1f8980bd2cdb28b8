"""Exceptions raised by vercmp."""

from typing import Any, Self


class VercmpError(Exception):
    """Base exception for all vercmp errors."""


class ParseError(VercmpError, ValueError):
    """Raised when a version or version component cannot be parsed.

    Attributes:
        value: The input that failed to parse.
    """

    def __init__(self: Self, value: Any, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            value: The input that failed to parse.
            reason: Optional explanation appended to the message.
        """
        self.value = value
        message = f"Unable to parse {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidArgumentError(VercmpError, ValueError):
    """Raised when a Version is constructed with an invalid major or minor.

    Attributes:
        name: Name of the offending argument.
        value: The rejected value.
    """

    def __init__(self: Self, name: str, value: Any, reason: str) -> None:
        """Initialize the error.

        Args:
            name: Name of the offending argument.
            value: The rejected value.
            reason: Explanation of what was expected.
        """
        self.name = name
        self.value = value
        super().__init__(f"Invalid argument '{name}' ({value!r}): {reason}")


class ComparisonDepthError(VercmpError, RecursionError):
    """Raised when nested values exceed the comparator's depth limit."""

    def __init__(self: Self, max_depth: int) -> None:
        """Initialize the error.

        Args:
            max_depth: The depth limit that was exceeded.
        """
        self.max_depth = max_depth
        super().__init__(
            f"Values are nested deeper than {max_depth} levels "
            "(or reference themselves)"
        )


class ConfigError(VercmpError):
    """Raised when configuration cannot be loaded or is invalid."""
