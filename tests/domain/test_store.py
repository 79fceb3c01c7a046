# tests/domain/test_store.py
import math

import pytest

from pathfinder.domain.entities.geography import Point
from pathfinder.domain.entities.graph import Edge, Node
from pathfinder.domain.errors import (
    DuplicateNodeError,
    GraphError,
    InvalidCostError,
    UnknownNodeError,
)
from pathfinder.domain.store import GraphStore


def test_get_unknown_node_raises():
    g = GraphStore()
    g.add_location("A", 0, 0)
    with pytest.raises(UnknownNodeError) as ei:
        g.get_node("Nonexistent")
    assert ei.value.node_id == "Nonexistent"
    assert isinstance(ei.value, LookupError) and isinstance(ei.value, GraphError)


def test_duplicate_node_rejected_and_original_kept():
    g = GraphStore()
    first = g.add_location("A", 1, 2)
    with pytest.raises(DuplicateNodeError):
        g.add_location("A", 9, 9)
    assert g.get_node("A") is first
    assert g.get_node("A").loc == Point(1.0, 2.0)


def test_edge_needs_registered_endpoints():
    g = GraphStore()
    g.add_location("A", 0, 0)
    with pytest.raises(UnknownNodeError):
        g.add_edge(Edge("A", "B", 1.0))
    with pytest.raises(UnknownNodeError):
        g.add_connection("B", "A", 1.0)
    assert g.all_edges() == []
    assert g.get_node("A").edges == []


@pytest.mark.parametrize("cost", [-1.0, math.inf, math.nan])
def test_invalid_costs_rejected(cost):
    g = GraphStore()
    g.add_location("A", 0, 0)
    g.add_location("B", 0, 1)
    with pytest.raises(InvalidCostError):
        g.add_connection("A", "B", cost)
    assert g.all_edges() == []


def test_connection_is_symmetric(triangle):
    edges = triangle.all_edges()
    assert len(edges) == 6
    as_set = {(e.origin, e.destination, e.cost) for e in edges}
    for o, d, c in as_set:
        assert (d, o, c) in as_set


def test_outgoing_edges_follow_registration(triangle):
    a = triangle.get_node("A")
    assert a.neighbors() == ["B", "C"]
    assert all(e.origin == "A" for e in a.edges)


def test_enumeration_is_registration_order(triangle):
    assert [n.id for n in triangle.all_nodes()] == ["A", "B", "C"]
    assert triangle.all_edges()[0] == Edge("A", "B", 1.0)
    assert triangle.all_edges()[1] == Edge("B", "A", 1.0)


def test_snapshots_are_copies(triangle):
    triangle.all_nodes().clear()
    triangle.all_edges().clear()
    assert len(triangle) == 3 and len(triangle.edges) == 6


def test_clear_and_is_empty(triangle):
    assert not triangle.is_empty()
    assert "A" in triangle and triangle.has_node("B")
    triangle.clear()
    assert triangle.is_empty()
    assert triangle.all_edges() == []
    assert "A" not in triangle


def test_add_node_object():
    g = GraphStore()
    g.add_node(Node("Z", Point(3.0, 4.0)))
    assert g.get_node("Z").loc.distance_to(Point(0.0, 0.0)) == 5.0


def test_nearest_node_respects_radius(triangle):
    assert triangle.nearest_node((9.0, 1.0)).id == "B"
    assert triangle.nearest_node(Point(9.0, 1.0), max_distance=6.0).id == "B"
    assert triangle.nearest_node((5.0, 5.0), max_distance=6.0) is None
    assert GraphStore().nearest_node((0.0, 0.0)) is None


def test_edge_helpers():
    e = Edge("B", "A", 2.0)
    assert e.reversed() == Edge("A", "B", 2.0)
    assert e.key == e.reversed().key == ("A", "B")
    assert Edge("A", "A", 0.0).is_loop and not e.is_loop
