"""Interactive prompt answering cheapest-route queries.

Usage:
    tour-cli routes.csv [more.csv ...]

Each query is typed as ``ORIGIN-DESTINY``; end the session with EOF
(Ctrl-D).
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from .config import configure_logging, get_config
from .container import Container
from .domain.errors import BulkLoadError, GraphError, NoRouteFoundError
from .graph.tour import Tour
from .ports.graph import RouteSolverPort, RouteStorePort

PROMPT = "please enter the route: "


def answer(tour: Tour, solver: RouteSolverPort, query: str) -> str:
    """Return the line printed for one ``ORIGIN-DESTINY`` query."""
    cities = [city.strip() for city in query.split("-")]
    if len(cities) != 2:
        return f"invalid input: '{query}'"

    origin_id = tour.get_city_id(cities[0])
    if origin_id is None:
        return f"unknown origin city: '{cities[0]}'"

    destiny_id = tour.get_city_id(cities[1])
    if destiny_id is None:
        return f"unknown destiny city: '{cities[1]}'"

    try:
        route = solver.solve(tour, origin_id, destiny_id)
    except NoRouteFoundError as e:
        return e.message

    return f"best route: {route.describe()}"


def prompt_loop(tour: Tour, solver: RouteSolverPort) -> None:
    """Read queries from standard input until EOF."""
    while True:
        try:
            query = input(PROMPT).strip()
        except EOFError:
            print()
            break
        if not query:
            continue
        print(answer(tour, solver, query))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tour-cli",
        description="Find the cheapest route between two cities.",
    )
    parser.add_argument(
        "csv_files",
        nargs="*",
        metavar="CSV",
        help="route files with one 'origin,destiny,cost' record per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log at the configured level instead of WARNING",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    config = get_config()
    observability = config.observability
    if not args.verbose:
        observability = observability.model_copy(update={"level": "WARNING"})
    configure_logging(observability)

    container = Container.create_default(config, extra_paths=args.csv_files)
    try:
        tour = container.resolve(RouteStorePort)
    except (GraphError, BulkLoadError) as e:
        print(f"cannot read CSV file {e.file_path}: {e}")
        return 1

    prompt_loop(tour, container.resolve(RouteSolverPort))
    return 0


if __name__ == "__main__":
    sys.exit(main())
