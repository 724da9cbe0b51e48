import io

import pytest

from tour.config import reset_config
from tour.graph import Tour

# Reference routes; the tab after the ORL,CDG cost is intentional.
REFERENCE_CSV = """GRU,BRC,10
BRC,SCL,5
GRU,CDG,75
GRU,SCL,20
GRU,ORL,56
ORL,CDG,5\t
SCL,ORL,20"""


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reference_csv() -> str:
    return REFERENCE_CSV


@pytest.fixture
def reference_routes() -> list[tuple[str, str, int]]:
    return [
        ("GRU", "BRC", 10),
        ("BRC", "SCL", 5),
        ("GRU", "CDG", 75),
        ("GRU", "SCL", 20),
        ("GRU", "ORL", 56),
        ("ORL", "CDG", 5),
        ("SCL", "ORL", 20),
    ]


@pytest.fixture
def reference_tour() -> Tour:
    tour = Tour()
    tour.load_from_csv(io.StringIO(REFERENCE_CSV))
    return tour


@pytest.fixture
def routes_file(tmp_path):
    path = tmp_path / "routes.csv"
    path.write_text(REFERENCE_CSV, encoding="utf-8")
    return path
