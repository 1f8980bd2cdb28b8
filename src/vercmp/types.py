"""Type aliases needed in the package."""

from collections.abc import Callable
from typing import Any, TypeAlias

CompareResult: TypeAlias = int | None
Comparator: TypeAlias = Callable[[Any, Any], CompareResult]
SortKey: TypeAlias = Callable[[Any], Any]
CompositeItems: TypeAlias = list[tuple[str, Any]]
