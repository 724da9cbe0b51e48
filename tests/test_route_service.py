import pytest

from tour.adapters.graph import DijkstraRouteSolver
from tour.graph import Tour
from tour.services import (
    AddRouteRequest,
    RouteService,
    ShortestRouteRequest,
)


@pytest.fixture
def service(reference_tour):
    return RouteService(tour=reference_tour, route_solver=DijkstraRouteSolver())


def test_add_route(service):
    response = service.add_route(AddRouteRequest(origin="LIS", destiny="GRU", cost=3))

    assert response.ok
    assert response.to_wire() == {"status": "ok", "response": {}}
    tour = service.tour
    assert tour.cost(tour.get_city_id("GRU"), tour.get_city_id("LIS")) == 3


@pytest.mark.parametrize("origin, destiny", [("", "GRU"), ("GRU", ""), ("", "")])
def test_add_route_rejects_empty_names(service, origin, destiny):
    cities_before = len(service.tour)

    response = service.add_route(AddRouteRequest(origin=origin, destiny=destiny, cost=1))

    assert response.to_wire() == {
        "status": "error",
        "reason": "city name cannot be empty",
    }
    assert len(service.tour) == cities_before


def test_shortest_route(service):
    response = service.shortest_route(ShortestRouteRequest(origin="GRU", destiny="CDG"))

    assert response.to_wire() == {
        "status": "ok",
        "response": {
            "shortestRoute": ["GRU", "BRC", "SCL", "ORL", "CDG"],
            "cost": 40,
        },
    }


def test_shortest_route_unknown_origin(service):
    response = service.shortest_route(ShortestRouteRequest(origin="XXX", destiny="CDG"))

    assert not response.ok
    assert response.to_wire() == {
        "status": "error",
        "reason": "unknown origin city: `XXX`",
    }


def test_shortest_route_unknown_destiny(service):
    response = service.shortest_route(ShortestRouteRequest(origin="GRU", destiny="YYY"))

    assert response.reason == "unknown destiny city: `YYY`"
    assert response.response is None


def test_shortest_route_without_connection():
    service = RouteService(tour=Tour(), route_solver=DijkstraRouteSolver())
    service.add_route(AddRouteRequest(origin="A", destiny="B", cost=1))
    service.add_route(AddRouteRequest(origin="C", destiny="D", cost=1))

    response = service.shortest_route(ShortestRouteRequest(origin="A", destiny="D"))

    assert response.to_wire() == {"status": "error", "reason": "no path to destiny"}


def test_added_route_changes_shortest_route(service):
    service.add_route(AddRouteRequest(origin="GRU", destiny="CDG", cost=30))

    response = service.shortest_route(ShortestRouteRequest(origin="GRU", destiny="CDG"))

    assert response.response.shortest_route == ["GRU", "CDG"]
    assert response.response.cost == 30
