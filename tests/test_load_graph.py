import io

import pytest

from tour.domain.errors import BulkLoadError, ColumnCountError, CostParseError
from tour.domain.models import Route
from tour.graph import Tour, load_routes, parse_routes


def test_load_from_csv_reproduces_every_cost(reference_csv, reference_routes):
    tour = Tour()

    count = tour.load_from_csv(io.StringIO(reference_csv))

    assert count == len(reference_routes)
    assert set(tour.city_names()) == {"GRU", "BRC", "SCL", "CDG", "ORL"}
    for origin, destiny, cost in reference_routes:
        a = tour.get_city_id(origin)
        b = tour.get_city_id(destiny)
        assert tour.cost(a, b) == cost, f"{origin} -> {destiny}"
        assert tour.cost(b, a) == cost, f"{destiny} -> {origin}"


def test_cities_are_interned_in_first_seen_order(reference_csv):
    tour = Tour()
    tour.load_from_csv(io.StringIO(reference_csv))

    assert tour.city_names() == ("GRU", "BRC", "SCL", "CDG", "ORL")


def test_fields_are_trimmed_and_blank_lines_skipped():
    text = "\n  GRU , BRC ,  10 \n\n   \n\tBRC,SCL,5\n"

    routes = list(parse_routes(io.StringIO(text)))

    assert routes == [Route("GRU", "BRC", 10), Route("BRC", "SCL", 5)]


def test_duplicate_routes_last_write_wins():
    tour = Tour()

    load_routes(tour, io.StringIO("A,B,3\nB,A,7\n"))

    a, b = tour.get_city_id("A"), tour.get_city_id("B")
    assert tour.cost(a, b) == 7
    assert tour.cost(b, a) == 7


@pytest.mark.parametrize(
    "bad_line, columns",
    [
        ("GRU,BRC", 2),
        ("GRU,BRC,10,20", 4),
        ("GRU", 1),
    ],
)
def test_wrong_column_count_fails_the_load(bad_line, columns):
    tour = Tour()
    text = f"A,B,1\n{bad_line}\nC,D,2\n"

    with pytest.raises(ColumnCountError) as excinfo:
        load_routes(tour, io.StringIO(text))

    assert excinfo.value.line_number == 2
    assert excinfo.value.columns == columns
    assert isinstance(excinfo.value, BulkLoadError)
    # lines after the bad one are never read
    assert not tour.has_city("C")


@pytest.mark.parametrize("cost", ["ten", "1.5", "", "1_000", "\u0661\u0662", "+"])
def test_non_integer_cost_fails_the_load(cost):
    with pytest.raises(CostParseError) as excinfo:
        list(parse_routes(io.StringIO(f"A,B,{cost}")))

    assert excinfo.value.line_number == 1
    assert excinfo.value.value == cost


def test_failed_load_keeps_routes_already_applied():
    tour = Tour()

    with pytest.raises(CostParseError):
        load_routes(tour, io.StringIO("A,B,1\nB,C,2\nC,D,x\n"))

    a, b, c = (tour.get_city_id(name) for name in "ABC")
    assert tour.cost(a, b) == 1
    assert tour.cost(b, c) == 2
    # the failing record is rejected before its cities are interned
    assert not tour.has_city("D")


def test_empty_input_loads_nothing():
    tour = Tour()

    assert tour.load_from_csv(io.StringIO("")) == 0
    assert len(tour) == 0


@pytest.mark.parametrize(
    "bad_line, columns",
    [
        (",", 2),
        (" , , , ", 4),
        (",,,", 4),
    ],
)
def test_comma_only_lines_are_not_blank(bad_line, columns):
    tour = Tour()

    with pytest.raises(ColumnCountError) as excinfo:
        load_routes(tour, io.StringIO(f"A,B,1\n{bad_line}\nC,D,2\n"))

    assert excinfo.value.line_number == 2
    assert excinfo.value.columns == columns


def test_empty_fields_reach_the_cost_check():
    with pytest.raises(CostParseError) as excinfo:
        list(parse_routes(io.StringIO("A,B,1\n,,\n")))

    assert excinfo.value.line_number == 2


def test_quotes_are_plain_text():
    with pytest.raises(ColumnCountError) as excinfo:
        list(parse_routes(io.StringIO('"GRU,X",BRC,10\n')))
    assert excinfo.value.columns == 4

    tour = Tour()
    load_routes(tour, io.StringIO('"GRU",BRC,10\n'))
    assert tour.city_names() == ('"GRU"', "BRC")


@pytest.mark.parametrize("cost, expected", [("+7", 7), ("-3", -3), (" 010 ", 10)])
def test_signed_and_padded_costs(cost, expected):
    routes = list(parse_routes(io.StringIO(f"A,B,{cost}\n")))

    assert routes[0].cost == expected
