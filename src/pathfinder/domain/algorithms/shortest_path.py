# pathfinder/domain/algorithms/shortest_path.py
import heapq
import math
import time

from pathfinder.app.protocols import NodeRef, ShortestPathEngine
from pathfinder.domain.entities.graph import Edge, Node
from pathfinder.domain.entities.path import Path
from pathfinder.domain.store import GraphStore
from pathfinder.runtime.hooks import NoopHooks, QueryHooks


def node_id(ref: NodeRef) -> str:
    return ref.id if isinstance(ref, Node) else ref


class _Dijkstra(ShortestPathEngine):
    QUERY = "shortest_path"

    def __init__(self, hooks: QueryHooks | None = None):
        self._hooks = hooks or NoopHooks()

    def find_shortest_path(self, graph: GraphStore, start: NodeRef, finish: NodeRef) -> Path:
        src = graph.get_node(node_id(start))
        dst = graph.get_node(node_id(finish))
        if src.id == dst.id:
            return Path()

        t0 = time.perf_counter()
        self._hooks.query_start(query=self.QUERY, start=src.id, finish=dst.id)
        path, settled = self._search(graph, src, dst)
        self._hooks.query_end(
            query=self.QUERY,
            start=src.id,
            finish=dst.id,
            found=not path.is_empty(),
            cost=path.total_cost,
            edges=len(path),
            settled=settled,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return path

    def _search(self, graph: GraphStore, start: Node, finish: Node) -> tuple[Path, int]:
        raise NotImplementedError


class PathQueueDijkstra(_Dijkstra):
    """
    Dijkstra with whole partial paths as queue entries.

    No distance table: a node is settled ("fixed") the first time a path
    reaching it leaves the queue, and that path is the cheapest one. Ties on
    cost pop in the order they were pushed.
    """

    def _search(self, graph, start, finish):
        fixed: dict[str, float] = {}
        q: list[tuple[float, int, Path]] = []
        seq = 0
        path, current = Path(), start
        while current.id != finish.id:
            if current.id not in fixed:
                fixed[current.id] = path.total_cost
                self._hooks.step(
                    query=self.QUERY, node=current.id, cost=path.total_cost, qsize=len(q)
                )
                for edge in current.edges:
                    if edge.destination not in fixed:
                        seq += 1
                        nxt = path.extended(edge)
                        heapq.heappush(q, (nxt.total_cost, seq, nxt))
            if not q:
                return Path(), len(fixed)
            _, _, path = heapq.heappop(q)
            current = graph.get_node(path.destination)
        return path, len(fixed)


class DistanceTableDijkstra(_Dijkstra):
    """Textbook Dijkstra: best-known distances plus the edge that reached each node."""

    def _search(self, graph, start, finish):
        dist: dict[str, float] = {start.id: 0.0}
        via: dict[str, Edge] = {}
        settled: set[str] = set()
        q: list[tuple[float, int, str]] = [(0.0, 0, start.id)]
        seq = 0
        while q:
            d, _, u = heapq.heappop(q)
            if u in settled:
                continue
            settled.add(u)
            self._hooks.step(query=self.QUERY, node=u, cost=d, qsize=len(q))
            if u == finish.id:
                break
            for edge in graph.get_node(u).edges:
                v = edge.destination
                if v in settled:
                    continue
                nd = d + edge.cost
                if nd < dist.get(v, math.inf):
                    dist[v], via[v] = nd, edge
                    seq += 1
                    heapq.heappush(q, (nd, seq, v))

        if finish.id not in settled:
            return Path(), len(settled)
        edges: list[Edge] = []
        v = finish.id
        while v != start.id:
            edges.append(via[v])
            v = via[v].origin
        edges.reverse()
        return Path(edges), len(settled)
