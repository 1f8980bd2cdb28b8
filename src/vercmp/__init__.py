"""vercmp - version numbers and a generic value comparison protocol.

A package for parsing, rendering and ordering four-component version numbers,
built on a comparator that orders arbitrary heterogeneous values.
"""

from ._version import __version__
from .comparator import (
    DEFAULT_MAX_DEPTH,
    INCOMPARABLE,
    compare,
    equals,
    sort_key,
    sort_values,
)
from .config import Settings, load_settings
from .exceptions import (
    ComparisonDepthError,
    ConfigError,
    InvalidArgumentError,
    ParseError,
    VercmpError,
)
from .protocols import Comparable, ComparableMixin, Equatable
from .types import Comparator, CompareResult
from .version import Version
from .version_component import VersionComponent

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "INCOMPARABLE",
    "Comparable",
    "ComparableMixin",
    "Comparator",
    "CompareResult",
    "ComparisonDepthError",
    "ConfigError",
    "Equatable",
    "InvalidArgumentError",
    "ParseError",
    "Settings",
    "VercmpError",
    "Version",
    "VersionComponent",
    "__version__",
    "compare",
    "equals",
    "load_settings",
    "sort_key",
    "sort_values",
]
