# tests/conftest.py
import pytest

from pathfinder.domain.store import GraphStore


@pytest.fixture
def triangle() -> GraphStore:
    """A-B=1, B-C=1, A-C=5."""
    g = GraphStore()
    g.add_location("A", 0.0, 0.0)
    g.add_location("B", 10.0, 0.0)
    g.add_location("C", 20.0, 0.0)
    g.add_connection("A", "B", 1)
    g.add_connection("B", "C", 1)
    g.add_connection("A", "C", 5)
    return g


@pytest.fixture
def islands() -> GraphStore:
    """Two connected pairs plus two isolated nodes X, Y."""
    g = GraphStore()
    for i, name in enumerate(["P", "Q", "R", "S", "X", "Y"]):
        g.add_location(name, float(i), float(i))
    g.add_connection("P", "Q", 2)
    g.add_connection("R", "S", 3)
    return g


SMALL_MAP = """\
Small.png
NODES
WashingtonDC 100 200
Minneapolis 50 80
Chicago 90 110
Dallas 60 300
ARCS
WashingtonDC Chicago 700
Chicago Minneapolis 400
Minneapolis Dallas 950
Chicago Dallas 920
WashingtonDC Dallas 1300
"""


@pytest.fixture
def small_map_text() -> str:
    return SMALL_MAP


@pytest.fixture
def small_map_file(tmp_path):
    p = tmp_path / "Small.txt"
    p.write_text(SMALL_MAP, encoding="utf-8")
    return p
