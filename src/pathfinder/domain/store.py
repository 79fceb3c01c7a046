# pathfinder/domain/store.py
import math
from dataclasses import dataclass, field

from pathfinder.domain.entities.geography import Point, Pt, to_point
from pathfinder.domain.entities.graph import Edge, Node
from pathfinder.domain.errors import DuplicateNodeError, InvalidCostError, UnknownNodeError


@dataclass
class GraphStore:
    """
    Owns every node and edge of one loaded map.

    Nodes are kept by id in registration order; edges refer to nodes by id.
    A reload is clear() followed by a full repopulation.
    """

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    # ---------------- registration ----------------

    def add_node(self, node: Node) -> None:
        if node.id in self.nodes:
            raise DuplicateNodeError(node.id)
        self.nodes[node.id] = node

    def add_location(self, node_id: str, x: float, y: float) -> Node:
        node = Node(node_id, Point(float(x), float(y)))
        self.add_node(node)
        return node

    def _check(self, edge: Edge) -> Node:
        origin = self.get_node(edge.origin)
        self.get_node(edge.destination)
        if not (math.isfinite(edge.cost) and edge.cost >= 0):
            raise InvalidCostError(edge.origin, edge.destination, edge.cost)
        return origin

    def add_edge(self, edge: Edge) -> None:
        self._check(edge).edges.append(edge)
        self.edges.append(edge)

    def add_connection(self, a: str, b: str, cost: float) -> tuple[Edge, Edge]:
        """Register an undirected connection as the pair a->b, b->a."""
        fwd = Edge(a, b, float(cost))
        back = fwd.reversed()
        self._check(fwd)  # a failure must leave neither direction behind
        self.add_edge(fwd)
        self.add_edge(back)
        return fwd, back

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    # ---------------- lookup ----------------

    def get_node(self, node_id: str) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def all_nodes(self) -> list[Node]:
        return list(self.nodes.values())

    def all_edges(self) -> list[Edge]:
        return list(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    def nearest_node(self, p: Pt, max_distance: float | None = None) -> Node | None:
        """Closest node to p, or None when nothing lies within max_distance."""
        p = to_point(p)
        best, best_d = None, math.inf
        for node in self.nodes.values():
            d = node.loc.distance_to(p)
            if d < best_d:
                best, best_d = node, d
        if best is None or (max_distance is not None and best_d >= max_distance):
            return None
        return best

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)
