"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BulkLoadError,
    CityNameError,
    ColumnCountError,
    CostParseError,
    GraphError,
    InvalidCityIDError,
    NoRouteFoundError,
    TourError,
)
from .models import CityID, Route, RouteResult

__all__ = [
    # Models
    "CityID",
    "Route",
    "RouteResult",
    # Errors
    "TourError",
    "BulkLoadError",
    "ColumnCountError",
    "CostParseError",
    "NoRouteFoundError",
    "GraphError",
    "CityNameError",
    "InvalidCityIDError",
]
