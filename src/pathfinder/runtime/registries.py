# runtime/registries.py
from collections.abc import Callable
from typing import Any

from pathfinder.app.protocols import MapReader, ShortestPathEngine, SpanningForestEngine
from pathfinder.config.models import (
    BucketForestModel,
    DistanceTableModel,
    MapModel,
    PathQueueModel,
    ShortestPathUnion,
    SpanningForestUnion,
    UnionFindForestModel,
)
from pathfinder.domain.algorithms.shortest_path import DistanceTableDijkstra, PathQueueDijkstra
from pathfinder.domain.algorithms.spanning_forest import BucketKruskal, UnionFindKruskal
from pathfinder.io.maps import ColumnarReader, StandardReader

ShortestPathFactory = Callable[[ShortestPathUnion, dict], ShortestPathEngine]
SpanningForestFactory = Callable[[SpanningForestUnion, dict], SpanningForestEngine]
MapReaderFactory = Callable[[MapModel, dict], MapReader]

_shortest_path_registry: dict[str, ShortestPathFactory] = {}
_spanning_forest_registry: dict[str, SpanningForestFactory] = {}
_map_reader_registry: dict[str, MapReaderFactory] = {}


def _lookup(registry: dict[str, Any], kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"Unknown {what} kind {kind!r}") from None


# ------------------- Shortest path engines ---------------------------


def register_shortest_path(kind: str):
    def deco(fn: ShortestPathFactory):
        _shortest_path_registry[kind] = fn
        return fn

    return deco


def make_shortest_path(cfg: ShortestPathUnion, *, deps: dict) -> ShortestPathEngine:
    return _lookup(_shortest_path_registry, cfg.kind, "shortest path")(cfg, deps)


@register_shortest_path("path_queue")
def _make_path_queue(cfg: PathQueueModel, deps):
    return PathQueueDijkstra(hooks=deps.get("hooks"))


@register_shortest_path("distance_table")
def _make_distance_table(cfg: DistanceTableModel, deps):
    return DistanceTableDijkstra(hooks=deps.get("hooks"))


# ------------------- Spanning forest engines ---------------------------


def register_spanning_forest(kind: str):
    def deco(fn: SpanningForestFactory):
        _spanning_forest_registry[kind] = fn
        return fn

    return deco


def make_spanning_forest(cfg: SpanningForestUnion, *, deps: dict) -> SpanningForestEngine:
    return _lookup(_spanning_forest_registry, cfg.kind, "spanning forest")(cfg, deps)


@register_spanning_forest("buckets")
def _make_buckets(cfg: BucketForestModel, deps):
    return BucketKruskal(hooks=deps.get("hooks"))


@register_spanning_forest("union_find")
def _make_union_find(cfg: UnionFindForestModel, deps):
    return UnionFindKruskal(hooks=deps.get("hooks"))


# ---------------------- Map readers ----------------------------


def register_map_reader(fmt: str):
    def deco(fn: MapReaderFactory):
        _map_reader_registry[fmt] = fn
        return fn

    return deco


def make_map_reader(cfg: MapModel, *, fmt: str | None = None) -> MapReader:
    fmt = fmt or cfg.fmt
    return _lookup(_map_reader_registry, fmt, "map format")(cfg, {})


@register_map_reader("standard")
def _make_standard(cfg: MapModel, deps):
    return StandardReader()


@register_map_reader("columnar")
def _make_columnar(cfg: MapModel, deps):
    return ColumnarReader(second_city_col=cfg.second_city_col, cost_col=cfg.cost_col)
