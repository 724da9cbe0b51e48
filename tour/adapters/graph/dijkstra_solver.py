"""Dijkstra route solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- City name resolution
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError
from ...domain.models import CityID, RouteResult
from ...graph.dijkstra import shortest_route
from ...graph.tour import Tour


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, tour: Tour, origin_id: CityID, destiny_id: CityID) -> RouteResult:
        """Find the cheapest path between two cities.

        Args:
            tour: The route graph.
            origin_id: Departure city ID.
            destiny_id: Arrival city ID.

        Returns:
            RouteResult with path, cost and city names.

        Raises:
            NoRouteFoundError: If no path exists.
        """
        origin = tour.get_city_name(origin_id)
        destiny = tour.get_city_name(destiny_id)
        self._logger.debug(
            "Solving route",
            extra={"origin": origin, "destiny": destiny},
        )

        try:
            path, cost = shortest_route(tour, origin_id, destiny_id)
        except NoRouteFoundError as e:
            self._logger.warning(
                "No route found",
                extra={"origin": origin, "destiny": destiny},
            )
            raise NoRouteFoundError(e.message, origin=origin, destiny=destiny)

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destiny": destiny,
                "stops": len(path),
                "cost": cost,
            },
        )

        return RouteResult(
            path=tuple(path),
            cost=cost,
            cities=tuple(tour.get_city_name(city_id) for city_id in path),
        )

