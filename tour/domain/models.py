"""Immutable domain models for the route tour.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts shared by the graph store,
the solver and the front ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

# Dense, zero-based handle assigned by Tour.add_city in first-seen order
CityID = NewType("CityID", int)


@dataclass(frozen=True, slots=True)
class Route:
    """A bidirectional route between two named cities.

    Attributes:
        origin: Name of one endpoint
        destiny: Name of the other endpoint
        cost: Cost of travelling the route in either direction
    """

    origin: str
    destiny: str
    cost: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-route computation.

    Attributes:
        path: Ordered city IDs from origin to destiny, both inclusive
        cost: Total cost of the path
        cities: City names along the path, when resolved
    """

    path: tuple[CityID, ...]
    cost: int
    cities: tuple[str, ...] = field(default_factory=tuple)

    def describe(self) -> str:
        """Format the route the way the interactive prompt prints it."""
        names = self.cities or tuple(str(city) for city in self.path)
        return f"{' - '.join(names)} > ${self.cost}"
