# pathfinder/app/build.py
import os
import time
from collections.abc import Mapping
from dataclasses import dataclass, field

from pathfinder.app.protocols import NodeRef, ShortestPathEngine, SpanningForestEngine
from pathfinder.config.models import MapModel, SessionModel
from pathfinder.domain.entities.geography import Pt
from pathfinder.domain.entities.graph import Edge, Node
from pathfinder.domain.entities.path import Path
from pathfinder.domain.errors import EmptyGraphError, GraphError
from pathfinder.domain.store import GraphStore
from pathfinder.io.maps import MapDescription, populate
from pathfinder.io.query_logging import QueryLogging
from pathfinder.runtime.hooks import NoopHooks, QueryHooks
from pathfinder.runtime.registries import make_shortest_path, make_spanning_forest
from pathfinder.runtime.resources import load_map


@dataclass
class Session:
    """
    One loaded map plus the engines that query it.

    Reloads are all-or-nothing: the store is cleared first and left empty if
    anything goes wrong while reading or populating. Queries on an empty store
    raise EmptyGraphError; the engines themselves never do.
    """

    shortest: ShortestPathEngine
    forest: SpanningForestEngine
    hooks: QueryHooks = field(default_factory=NoopHooks)
    store: GraphStore = field(default_factory=GraphStore)
    radius: float = 6.0
    source: str | None = None

    # ---------------- map lifecycle ----------------

    def reload(self, m: MapModel | str | os.PathLike) -> None:
        cfg = m if isinstance(m, MapModel) else MapModel(file=os.fspath(m))
        self.store.clear()
        self.source = None
        try:
            desc = load_map(cfg)
        except (GraphError, OSError) as exc:
            self.hooks.error(query="reload", exc=exc, source=cfg.file)
            raise
        self.load(desc, source=cfg.file)

    def load(self, desc: MapDescription, *, source: str = "<memory>") -> None:
        t0 = time.perf_counter()
        self.hooks.reload_start(source=source)
        self.store.clear()
        self.source = None
        try:
            populate(self.store, desc)
        except GraphError as exc:
            self.store.clear()
            self.hooks.error(query="reload", exc=exc, source=source)
            raise
        self.source = source
        self.hooks.reload_end(
            source=source,
            nodes=len(self.store),
            edges=len(self.store.edges),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )

    # ---------------- queries ----------------

    def _require_map(self) -> None:
        if self.store.is_empty():
            raise EmptyGraphError()

    def shortest_path(self, start: NodeRef, finish: NodeRef) -> Path:
        self._require_map()
        try:
            return self.shortest.find_shortest_path(self.store, start, finish)
        except GraphError as exc:
            self.hooks.error(query="shortest_path", exc=exc)
            raise

    def spanning_forest(self) -> list[Edge]:
        self._require_map()
        return self.forest.find_minimum_spanning_forest(self.store.all_edges())

    def select(self, p: Pt) -> Node | None:
        """Node drawn under map position p, if any (within the selection radius)."""
        self._require_map()
        return self.store.nearest_node(p, max_distance=self.radius)


def build(cfg: SessionModel | Mapping | None = None, *, use_logging: bool = True) -> Session:
    # 0) Validate config
    if cfg is None:
        model = SessionModel()
    else:
        model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        QueryLogging(
            session=model.name,
            level=model.log.level,
            debug=model.log.debug,
            stream=model.log.stream,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Engines (inject deps explicitly)
    deps = {"hooks": hooks}
    session = Session(
        shortest=make_shortest_path(model.shortest_path, deps=deps),
        forest=make_spanning_forest(model.spanning_forest, deps=deps),
        hooks=hooks,
        radius=model.selection.radius,
    )

    # 3) Initial map, if configured
    if model.map is not None:
        session.reload(model.map)
    return session
