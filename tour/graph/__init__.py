"""Route graph: the in-memory city store, CSV loading and shortest routes."""

from .dijkstra import CostInfo, CostQueue, shortest_route
from .load_graph import load_routes, parse_routes
from .tour import Tour

__all__ = [
    "Tour",
    "load_routes",
    "parse_routes",
    "shortest_route",
    "CostInfo",
    "CostQueue",
]
