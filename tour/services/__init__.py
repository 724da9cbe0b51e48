"""Services layer - Application orchestration.

Available services:
- RouteService: Adds routes and answers cheapest-route queries
"""

from .route_service import RouteService
from .schemas import (
    AddRouteRequest,
    AddRouteResponse,
    ShortestRouteRequest,
    ShortestRouteResponse,
)

__all__ = [
    "RouteService",
    "AddRouteRequest",
    "AddRouteResponse",
    "ShortestRouteRequest",
    "ShortestRouteResponse",
]
