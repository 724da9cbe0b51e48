"""Route service - request/response facade over the route graph.

Validates city names, resolves them to IDs, runs the solver and wraps
every outcome in an ``ok``/``error`` envelope. The service is not
synchronized; concurrent front ends must serialize calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import CityNameError, NoRouteFoundError
from ..graph.tour import Tour
from ..ports.graph import RouteSolverPort
from .schemas import (
    STATUS_ERROR,
    STATUS_OK,
    AddRouteOutput,
    AddRouteRequest,
    AddRouteResponse,
    ShortestRouteOutput,
    ShortestRouteRequest,
    ShortestRouteResponse,
)


@dataclass
class RouteService:
    """Main service for registering routes and querying the cheapest one.

    Attributes:
        tour: The route graph this service owns
        route_solver: Computes cheapest paths
    """

    tour: Tour
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_route(self, request: AddRouteRequest) -> AddRouteResponse:
        """Register a route between two cities, adding unknown cities."""
        try:
            self._check_names(request.origin, request.destiny)
        except CityNameError as e:
            return AddRouteResponse(status=STATUS_ERROR, reason=e.message)

        origin_id = self.tour.add_city(request.origin)
        destiny_id = self.tour.add_city(request.destiny)
        self.tour.add_route(origin_id, destiny_id, request.cost)
        self._logger.info(
            "Route added",
            extra={
                "origin": request.origin,
                "destiny": request.destiny,
                "cost": request.cost,
            },
        )
        return AddRouteResponse(status=STATUS_OK, response=AddRouteOutput())

    def shortest_route(self, request: ShortestRouteRequest) -> ShortestRouteResponse:
        """Find the cheapest route between two known cities."""
        origin_id = self.tour.get_city_id(request.origin)
        if origin_id is None:
            return ShortestRouteResponse(
                status=STATUS_ERROR,
                reason=f"unknown origin city: `{request.origin}`",
            )

        destiny_id = self.tour.get_city_id(request.destiny)
        if destiny_id is None:
            return ShortestRouteResponse(
                status=STATUS_ERROR,
                reason=f"unknown destiny city: `{request.destiny}`",
            )

        try:
            route = self.route_solver.solve(self.tour, origin_id, destiny_id)
        except NoRouteFoundError as e:
            return ShortestRouteResponse(status=STATUS_ERROR, reason=e.message)

        return ShortestRouteResponse(
            status=STATUS_OK,
            response=ShortestRouteOutput(
                shortest_route=list(route.cities),
                cost=route.cost,
            ),
        )

    @staticmethod
    def _check_names(origin: str, destiny: str) -> None:
        for field_name, name in (("origin", origin), ("destiny", destiny)):
            if not name:
                raise CityNameError(
                    "city name cannot be empty",
                    field_name=field_name,
                )
