from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from pathfinder.domain.entities.graph import Edge, Node
from pathfinder.domain.entities.path import Path
from pathfinder.domain.store import GraphStore

NodeRef = Node | str


@runtime_checkable
class ShortestPathEngine(Protocol):
    """
    Responsibilities:
      • Return a least-cost Path from start to finish over a GraphStore.
      • Return the empty Path when start == finish or finish is unreachable.
      • Raise UnknownNodeError when either endpoint is not in the store.
    Costs are assumed non-negative (the store enforces it).
    """

    def find_shortest_path(self, graph: GraphStore, start: NodeRef, finish: NodeRef) -> Path: ...


@runtime_checkable
class SpanningForestEngine(Protocol):
    """
    Responsibilities:
      • Pick a minimum-cost acyclic subset of edges spanning every component.
      • Never return both directions of one connection.
    An empty input yields an empty result.
    """

    def find_minimum_spanning_forest(self, edges: Iterable[Edge]) -> list[Edge]: ...


@runtime_checkable
class MapReader(Protocol):
    def parse_connection(self, line: str, line_no: int) -> tuple[str, str, float]: ...
