"""Route loading from CSV text.

Each non-blank line holds one route: ``origin,destiny,cost``. Fields
are split on every comma (no quoting) and trimmed; the cost must be a
plain ASCII integer. A bad line aborts the load; routes from the lines
before it are kept.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from ..domain.errors import ColumnCountError, CostParseError
from ..domain.models import Route
from .tour import Tour

COLUMNS = 3

_COST_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_routes(lines: Iterable[str]) -> Iterator[Route]:
    """Parse route records lazily.

    Raises:
        ColumnCountError: If a line does not have exactly three fields.
        CostParseError: If a cost is not an integer.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        columns = line.split(",")
        if len(columns) != COLUMNS:
            raise ColumnCountError(
                "invalid number of columns on CSV",
                line_number=line_number,
                columns=len(columns),
            )

        origin, destiny, cost_str = (column.strip() for column in columns)
        if not _COST_PATTERN.fullmatch(cost_str):
            raise CostParseError(
                f"invalid cost on CSV line {line_number}: {cost_str!r}",
                line_number=line_number,
                value=cost_str,
            )

        yield Route(origin=origin, destiny=destiny, cost=int(cost_str))


def load_routes(tour: Tour, lines: Iterable[str]) -> int:
    """Add every route read from ``lines`` to ``tour``.

    Returns:
        The number of routes added.
    """
    count = 0
    for route in parse_routes(lines):
        origin_id = tour.add_city(route.origin)
        destiny_id = tour.add_city(route.destiny)
        tour.add_route(origin_id, destiny_id, route.cost)
        count += 1
    return count
