# pathfinder/domain/entities/path.py
from collections.abc import Iterator
from dataclasses import dataclass, field

from pathfinder.domain.entities.graph import Edge


@dataclass
class Path:
    """
    A walk through the graph as an ordered list of edges.

    Consecutive edges must chain (each origin equals the previous destination).
    The empty path stands for both "no route" and "start equals finish".
    Paths order by total cost so they can sit directly in a priority queue.
    """

    edges: list[Edge] = field(default_factory=list)
    total_cost: float = field(default=0.0, init=False)

    def __post_init__(self):
        edges, self.edges = list(self.edges), []
        for e in edges:
            self.append(e)

    def append(self, edge: Edge) -> None:
        if self.edges and self.edges[-1].destination != edge.origin:
            raise ValueError(
                f"edge {edge.origin}->{edge.destination} does not continue "
                f"path ending at {self.edges[-1].destination}"
            )
        self.edges.append(edge)
        self.total_cost += edge.cost

    def remove_last(self) -> Edge:
        if not self.edges:
            raise IndexError("remove_last from empty path")
        e = self.edges.pop()
        # must equal the sum of the remaining edges exactly
        self.total_cost = sum(x.cost for x in self.edges)
        return e

    def extended(self, edge: Edge) -> "Path":
        p = Path(self.edges)
        p.append(edge)
        return p

    @property
    def origin(self) -> str | None:
        return self.edges[0].origin if self.edges else None

    @property
    def destination(self) -> str | None:
        return self.edges[-1].destination if self.edges else None

    def nodes(self) -> list[str]:
        if not self.edges:
            return []
        return [self.edges[0].origin, *(e.destination for e in self.edges)]

    def is_empty(self) -> bool:
        return not self.edges

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    # ordered by total cost; only other paths compare
    def __lt__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.total_cost < other.total_cost

    def __le__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.total_cost <= other.total_cost

    def __gt__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.total_cost > other.total_cost

    def __ge__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.total_cost >= other.total_cost
