# pathfinder/domain/algorithms/spanning_forest.py
import heapq
import time
from collections.abc import Iterable, Iterator

from pathfinder.app.protocols import SpanningForestEngine
from pathfinder.domain.algorithms.disjoint_set import DisjointSet
from pathfinder.domain.entities.graph import Edge
from pathfinder.runtime.hooks import NoopHooks, QueryHooks


def by_cost(edges: Iterable[Edge]) -> Iterator[Edge]:
    """Yield edges cheapest first; equal costs fall back to (origin, destination)."""
    q = [(e.cost, e.origin, e.destination, i, e) for i, e in enumerate(edges)]
    heapq.heapify(q)
    while q:
        yield heapq.heappop(q)[-1]


class _Kruskal(SpanningForestEngine):
    QUERY = "spanning_forest"

    def __init__(self, hooks: QueryHooks | None = None):
        self._hooks = hooks or NoopHooks()

    def find_minimum_spanning_forest(self, edges: Iterable[Edge]) -> list[Edge]:
        edges = list(edges)
        t0 = time.perf_counter()
        self._hooks.query_start(query=self.QUERY, candidates=len(edges))
        forest = self._select(by_cost(edges))
        self._hooks.query_end(
            query=self.QUERY,
            candidates=len(edges),
            edges=len(forest),
            cost=sum(e.cost for e in forest),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return forest

    def _select(self, ordered: Iterator[Edge]) -> list[Edge]:
        raise NotImplementedError


class BucketKruskal(_Kruskal):
    """
    Kruskal with components tracked as a list of id buckets.

    Every edge scans the buckets: both ends in one bucket closes a cycle and is
    dropped; one end known grows that bucket; ends in two buckets merge them;
    no end known opens a new bucket. Linear in the bucket count per edge.
    """

    def _select(self, ordered):
        buckets: list[set[str]] = []
        forest: list[Edge] = []
        for edge in ordered:
            if edge.is_loop:
                continue
            if self._place(buckets, edge.origin, edge.destination):
                forest.append(edge)
                self._hooks.step(query=self.QUERY, edge=edge.key, buckets=len(buckets))
        return forest

    @staticmethod
    def _place(buckets: list[set[str]], u: str, v: str) -> bool:
        hits: list[int] = []
        for i, bucket in enumerate(buckets):
            has_u, has_v = u in bucket, v in bucket
            if has_u and has_v:
                return False
            if has_u or has_v:
                hits.append(i)
                if len(hits) == 2:
                    keep, drop = hits
                    buckets[keep] |= buckets[drop]
                    del buckets[drop]
                    return True
        if hits:
            buckets[hits[0]].update((u, v))
        else:
            buckets.append({u, v})
        return True


class UnionFindKruskal(_Kruskal):
    """Kruskal over a DisjointSet; same edge order, same result as BucketKruskal."""

    def _select(self, ordered):
        components = DisjointSet()
        forest: list[Edge] = []
        for edge in ordered:
            if edge.is_loop:
                continue
            if components.union(edge.origin, edge.destination):
                forest.append(edge)
                self._hooks.step(query=self.QUERY, edge=edge.key)
        return forest
