"""In-memory route graph.

A Tour is a graph whose nodes are cities and whose edges are routes.
City names are interned into dense integer IDs; routes are stored as a
pair of directed edges so that both directions share the same cost.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, TextIO, Tuple

from ..domain.errors import InvalidCityIDError
from ..domain.models import CityID, Route


class Tour:
    """Cities, their IDs and the cost of every route between them.

    The store is not synchronized. Callers sharing one Tour between
    threads must serialize every call (see ``tour.web``).
    """

    def __init__(self) -> None:
        self._cities: List[str] = []  # ID -> city
        self._lookup: Dict[str, CityID] = {}  # city -> ID
        self._connections: Dict[CityID, Dict[CityID, int]] = {}  # city -> city -> cost

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return name in self._lookup

    def add_city(self, name: str) -> CityID:
        """Intern a city name, returning its ID.

        Unknown names get the next sequential ID; known names keep the
        ID they were first given.
        """
        city_id = self._lookup.get(name)
        if city_id is None:
            city_id = CityID(len(self._cities))
            self._cities.append(name)
            self._lookup[name] = city_id
        return city_id

    def get_city_id(self, name: str) -> Optional[CityID]:
        """Return the ID of a city, or None if it was never added."""
        return self._lookup.get(name)

    def has_city(self, name: str) -> bool:
        return name in self._lookup

    def get_city_name(self, city_id: CityID) -> str:
        """Return the name of a city by ID.

        Raises:
            InvalidCityIDError: If the ID was not produced by this tour.
        """
        if city_id < 0 or city_id >= len(self._cities):
            raise InvalidCityIDError(city_id, len(self._cities))
        return self._cities[city_id]

    def city_names(self) -> Tuple[str, ...]:
        """Return every city name, indexed by city ID."""
        return tuple(self._cities)

    def _add_edge(self, origin_id: CityID, destiny_id: CityID, cost: int) -> None:
        self._connections.setdefault(origin_id, {})[destiny_id] = cost

    def add_route(self, origin_id: CityID, destiny_id: CityID, cost: int) -> None:
        """Add a route between two cities, replacing any previous cost.

        Both IDs must come from add_city. The cost is stored as given;
        the shortest-route search is only correct for non-negative costs.
        """
        self._add_edge(origin_id, destiny_id, cost)
        self._add_edge(destiny_id, origin_id, cost)

    def cost(self, origin_id: CityID, destiny_id: CityID) -> Optional[int]:
        """Return the cost of the direct route between two cities, if any."""
        return self._connections.get(origin_id, {}).get(destiny_id)

    def neighbors(self, city_id: CityID) -> Dict[CityID, int]:
        """Return the cities directly reachable from a city and their costs.

        The returned mapping is read-only by contract; use add_route to
        change it.
        """
        return self._connections.get(city_id, {})

    def routes(self) -> Iterator[Route]:
        """Yield every route once, with endpoints in ID order."""
        for origin_id, destinies in self._connections.items():
            for destiny_id, cost in destinies.items():
                if origin_id <= destiny_id:
                    yield Route(
                        origin=self._cities[origin_id],
                        destiny=self._cities[destiny_id],
                        cost=cost,
                    )

    def load_from_csv(self, stream: TextIO) -> int:
        """Load routes from CSV text, see ``load_graph.load_routes``."""
        from .load_graph import load_routes

        return load_routes(self, stream)
