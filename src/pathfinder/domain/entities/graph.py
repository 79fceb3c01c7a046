# pathfinder/domain/entities/graph.py
from dataclasses import dataclass, field

from pathfinder.domain.entities.geography import Point


@dataclass(frozen=True)
class Edge:
    origin: str  # node ids, never node objects
    destination: str
    cost: float

    def reversed(self) -> "Edge":
        return Edge(self.destination, self.origin, self.cost)

    @property
    def key(self) -> tuple[str, str]:
        """Orientation-free key shared by both directions of a connection."""
        a, b = self.origin, self.destination
        return (a, b) if a <= b else (b, a)

    @property
    def is_loop(self) -> bool:
        return self.origin == self.destination


@dataclass(frozen=True)
class Node:
    id: str
    loc: Point
    # outgoing edges; the only part of a node that changes after registration
    edges: list[Edge] = field(default_factory=list, compare=False, hash=False, repr=False)

    def neighbors(self) -> list[str]:
        return [e.destination for e in self.edges]
