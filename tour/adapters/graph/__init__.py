"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVRouteRepository: Loads the route graph from CSV files
- DijkstraRouteSolver: Finds cheapest routes using Dijkstra's algorithm
"""

from .csv_repository import CSVRouteRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVRouteRepository", "DijkstraRouteSolver"]
