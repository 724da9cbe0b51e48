"""Typed domain errors for the route tour.

Recoverable errors inherit from TourError and can optionally wrap a
root cause exception for debugging. InvalidCityIDError is kept outside
that hierarchy: it signals a caller bug, not bad input, and is never
caught by the service or the front ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TourError(Exception):
    """Base error for the route tour domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class BulkLoadError(TourError):
    """A route record could not be loaded.

    Lines applied before the failing one stay applied.

    Attributes:
        line_number: 1-based line of the offending record
        file_path: Path to the route file, when loading from disk
    """

    line_number: int = 0
    file_path: Optional[str] = None


@dataclass
class ColumnCountError(BulkLoadError):
    """A route record does not have exactly three columns.

    Attributes:
        columns: Number of columns found on the line
    """

    columns: int = 0


@dataclass
class CostParseError(BulkLoadError):
    """The cost column of a route record is not an integer.

    Attributes:
        value: The raw cost text
    """

    value: str = ""


@dataclass
class NoRouteFoundError(TourError):
    """No path exists between the requested cities.

    Attributes:
        origin: Origin city name, when known
        destiny: Destiny city name, when known
    """

    origin: str = ""
    destiny: str = ""


@dataclass
class GraphError(TourError):
    """Route data could not be read.

    Attributes:
        file_path: Path to the route file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class CityNameError(TourError):
    """A city name given to the service is empty.

    Attributes:
        field_name: Request field holding the bad name
    """

    field_name: str = ""


class InvalidCityIDError(IndexError):
    """A city ID outside the store's range was dereferenced."""

    def __init__(self, city_id: int, city_count: int) -> None:
        super().__init__(f"invalid city ID: {city_id} (known cities: {city_count})")
        self.city_id = city_id
        self.city_count = city_count
