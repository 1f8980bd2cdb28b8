"""Models a four-component version number such as ``1.2.3.4``."""

import re
from dataclasses import dataclass, field
from typing import Any, Final, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .exceptions import InvalidArgumentError, ParseError
from .protocols import ComparableMixin
from .types import CompareResult
from .version_component import VersionComponent

MIN_SEGMENTS: Final = 2
MAX_SEGMENTS: Final = 4
VERSION_PATTERN: Final = r"^\d+\.\d+(\.\d+(\.\d+)?)?$"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"\s*[0-9]+\s*")


def _coerce_int(segment: str, text: str, strict: bool) -> int:
    """Read a major or minor segment the way an integer cast would.

    Leniently, a leading optionally-signed run of digits is used and any
    other text reads as 0.
    """
    if strict:
        if not _STRICT_INT.fullmatch(segment):
            raise ParseError(text, f"segment {segment!r} is not a number")
        return int(segment)
    match = _LEADING_INT.match(segment)
    return int(match.group(1)) if match else 0


def _check_required(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            name,
            value,
            f"must be an int, {type(value).__name__} given; "
            "use Version.parse() to build a version from a string",
        )
    if value < 0:
        raise InvalidArgumentError(name, value, "must not be negative")


@dataclass(frozen=True, eq=False, slots=True)
class Version(ComparableMixin):
    """Version number of the form ``major.minor[.build[.revision]]``.

    Major and minor are required. Build and revision are optional and
    accept anything ``VersionComponent.parse`` does; when omitted they are
    undefined, which sorts before any defined value.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        build: Build component.
        revision: Revision component.

    Example:
        >>> Version(1, 0) < Version(1, 0, 1) < Version(1, 0, 1, 1)
        True
        >>> str(Version.parse("1.2.0.5"))
        '1.2'
    """

    major: int
    minor: int
    build: VersionComponent = field(default_factory=VersionComponent)
    revision: VersionComponent = field(default_factory=VersionComponent)

    def __post_init__(self: Self) -> None:
        """Validate major and minor and normalize the optional components.

        Raises:
            InvalidArgumentError: If major or minor is not a non-negative int.
            ParseError: If build or revision cannot be parsed.
        """
        _check_required("major", self.major)
        _check_required("minor", self.minor)
        object.__setattr__(self, "build", VersionComponent.parse(self.build))
        object.__setattr__(self, "revision", VersionComponent.parse(self.revision))

    @classmethod
    def parse(cls, value: "str | Version", *, strict: bool = False) -> "Version":
        """Parse a version string.

        Major and minor are read leniently unless ``strict`` is set: text
        that does not start with a number reads as 0.

        Args:
            value: Version string in format "major.minor[.build[.revision]]",
                or a Version, which is returned unchanged.
            strict: Reject major and minor segments that are not numbers.

        Returns:
            Parsed Version instance.

        Raises:
            ParseError: If the string does not have 2 to 4 segments, a
                segment is malformed, or value is not a string.
            InvalidArgumentError: If major or minor is negative.
        """
        if isinstance(value, Version):
            return value
        if not isinstance(value, str):
            raise ParseError(value, f"expected a string, {type(value).__name__} given")

        parts = value.split(".")
        if not MIN_SEGMENTS <= len(parts) <= MAX_SEGMENTS:
            raise ParseError(
                value,
                f"expected {MIN_SEGMENTS} to {MAX_SEGMENTS} dot-separated "
                f"segments, got {len(parts)}",
            )

        major = _coerce_int(parts[0], value, strict)
        minor = _coerce_int(parts[1], value, strict)
        build = parts[2] if len(parts) > 2 else None  # noqa: PLR2004
        revision = parts[3] if len(parts) > 3 else None  # noqa: PLR2004

        return cls(major, minor, build, revision)  # type: ignore[arg-type]

    def to_string(self: Self) -> str:
        """Render the version.

        Major and minor are always shown. The build is shown only when it is
        greater than zero, and the revision only when it is greater than
        zero and the build was shown.

        Returns:
            Version string in format "major.minor[.build[.revision]]".
        """
        text = f"{self.major}.{self.minor}"
        if self.build.int_value > 0:
            text += f".{self.build}"
            if self.revision.int_value > 0:
                text += f".{self.revision}"
        return text

    def is_valid(self: Self) -> bool:
        """Check that at least one component carries information.

        Returns:
            False if every component is zero or undefined, True otherwise.
        """
        return bool(
            self.major
            or self.minor
            or self.build.int_value > 0
            or self.revision.int_value > 0
        )

    def equals(self: Self, other: Any) -> bool:
        """Return True if ``other`` is a Version with the same components."""
        if not isinstance(other, Version):
            return False
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.build.equals(other.build)
            and self.revision.equals(other.revision)
        )

    def compare_to(self: Self, other: Any) -> CompareResult:
        """Determine the position of this version relative to ``other``.

        Components are compared in order (major, minor, build, revision) and
        the first difference decides.

        Args:
            other: Version to compare against.

        Returns:
            -1, 0 or 1, or None if ``other`` is not a Version.
        """
        if not isinstance(other, Version):
            return None
        if self.equals(other):
            return 0

        result = (self.major > other.major) - (self.major < other.major)
        if result == 0:
            result = (self.minor > other.minor) - (self.minor < other.minor)
        if result == 0:
            result = VersionComponent.compare(self.build, other.build)
        if result == 0:
            result = VersionComponent.compare(self.revision, other.revision)
        return result

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.equals(other)

    def __hash__(self: Self) -> int:
        return hash((self.major, self.minor, self.build, self.revision))

    def __str__(self: Self) -> str:
        """Return string representation of version."""
        return self.to_string()

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return (
            f"Version({self.major}, {self.minor}, "
            f"{self.build.value!r}, {self.revision.value!r})"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from strings or Version instances and dump as text."""
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe versions as patterned strings in JSON Schema."""
        return {"type": "string", "pattern": VERSION_PATTERN}
