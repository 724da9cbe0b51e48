"""Shortest-route computation using Dijkstra's algorithm.

``heapq`` cannot lower the priority of an entry already in the heap, so
this module keeps its own binary min-heap whose entries remember their
slot. Relaxing a city then repositions its single entry in
O(log n) instead of pushing a duplicate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..domain.errors import InvalidCityIDError, NoRouteFoundError
from ..domain.models import CityID
from .tour import Tour

INFINITY = math.inf


@dataclass(slots=True)
class CostInfo:
    """Cost queue entry.

    Attributes:
        city: City this entry tracks
        cost: Tentative cost from the origin (INFINITY when unreached)
        index: Current slot in the queue, -1 once popped
    """

    city: CityID
    cost: float
    index: int = -1


class CostQueue:
    """Array-backed binary min-heap of CostInfo keyed by cost."""

    def __init__(self) -> None:
        self._heap: List[CostInfo] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, item: CostInfo) -> None:
        item.index = len(self._heap)
        self._heap.append(item)
        self._sift_up(item.index)

    def pop(self) -> CostInfo:
        """Remove and return the entry with the lowest cost."""
        if not self._heap:
            raise IndexError("pop from an empty cost queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        item = self._heap.pop()
        item.index = -1
        if self._heap:
            self._sift_down(0)
        return item

    def fix(self, index: int) -> None:
        """Restore heap order after the cost at ``index`` changed."""
        if not self._sift_down(index):
            self._sift_up(index)

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].cost < self._heap[j].cost

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> bool:
        """Move an entry down; return True if it moved."""
        start = index
        size = len(self._heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest
        return index > start


def shortest_route(
    tour: Tour, origin_id: CityID, destiny_id: CityID
) -> Tuple[List[CityID], int]:
    """Compute the cheapest path between two cities.

    Every city is queued, reached or not, so the full shortest-path
    tree from ``origin_id`` is built before the path is read back.
    Costs must be non-negative for the result to be correct.

    Parameters
    ----------
    tour:
        Route graph holding both cities.
    origin_id:
        ID of the departure city.
    destiny_id:
        ID of the arrival city.

    Returns
    -------
    list[CityID], int
        City IDs from ``origin_id`` to ``destiny_id`` (inclusive) and
        the total cost.

    Raises
    ------
    NoRouteFoundError
        If no route connects the two cities.
    InvalidCityIDError
        If either ID was not produced by ``tour``.
    """
    city_count = len(tour)
    for city_id in (origin_id, destiny_id):
        if city_id < 0 or city_id >= city_count:
            raise InvalidCityIDError(city_id, city_count)

    queue = CostQueue()
    previous: List[Optional[CityID]] = [None] * city_count
    cost_by_city: List[CostInfo] = []

    for i in range(city_count):
        info = CostInfo(city=CityID(i), cost=0 if i == origin_id else INFINITY)
        cost_by_city.append(info)
        queue.push(info)

    # discover minimal routes for each reachable city
    while queue:
        info = queue.pop()
        if info.cost == INFINITY:
            continue
        for next_id, cost in tour.neighbors(info.city).items():
            next_info = cost_by_city[next_id]
            if next_info.index < 0:
                continue  # already settled
            candidate = info.cost + cost
            if candidate < next_info.cost:
                previous[next_id] = info.city
                next_info.cost = candidate
                queue.fix(next_info.index)

    if previous[destiny_id] is None and destiny_id != origin_id:
        raise NoRouteFoundError("no path to destiny")

    path: List[CityID] = []
    city: Optional[CityID] = destiny_id
    while city != origin_id:
        path.append(city)  # type: ignore[arg-type]
        city = previous[city]  # type: ignore[index]
    path.append(origin_id)
    path.reverse()

    return path, int(cost_by_city[destiny_id].cost)
