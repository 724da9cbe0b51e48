"""Graph ports - Abstractions for route storage, loading and solving.

These protocols define the contracts between the route service and
the concrete graph store, repository and solver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import CityID, RouteResult
    from ..graph.tour import Tour


class RouteStorePort(Protocol):
    """Port for the in-memory route graph.

    Implementation: graph/tour.py (Tour)
    """

    def add_city(self, name: str) -> CityID:
        """Intern a city name and return its ID."""
        ...

    def get_city_id(self, name: str) -> Optional[CityID]:
        """Return the ID of a known city, or None."""
        ...

    def get_city_name(self, city_id: CityID) -> str:
        """Return the name of a city.

        Raises:
            InvalidCityIDError: If the ID is out of range.
        """
        ...

    def add_route(self, origin_id: CityID, destiny_id: CityID, cost: int) -> None:
        """Store a route in both directions."""
        ...

    def cost(self, origin_id: CityID, destiny_id: CityID) -> Optional[int]:
        """Return the direct route cost, or None."""
        ...


class RouteRepositoryPort(Protocol):
    """Port for building a route graph from persistent data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> Tour:
        """Load the route graph.

        Returns:
            The populated Tour (cached after the first call).
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (shortest_route)
    """

    def solve(self, tour: Tour, origin_id: CityID, destiny_id: CityID) -> RouteResult:
        """Find the cheapest path between two cities.

        Args:
            tour: The route graph.
            origin_id: Departure city ID.
            destiny_id: Arrival city ID.

        Returns:
            RouteResult with path, cost and city names.

        Raises:
            NoRouteFoundError: If the cities are not connected.
        """
        ...
