# pathfinder/domain/generators.py
from typing import Literal

import numpy as np

from pathfinder.domain.store import GraphStore


def random_graph(
    n_nodes: int,
    edge_prob: float,
    rng: np.random.Generator,
    *,
    cost: Literal["integer", "distance"] = "integer",
    max_cost: int = 10,
    extent: float = 100.0,
    store: GraphStore | None = None,
) -> GraphStore:
    """
    Random located nodes joined by symmetric connections.

    Every unordered pair is connected with probability edge_prob. Costs are
    either integers in [0, max_cost] (plenty of ties) or the straight-line
    distance between the two nodes.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be >= 0")
    if not 0.0 <= edge_prob <= 1.0:
        raise ValueError("edge_prob must be in [0, 1]")

    store = store if store is not None else GraphStore()
    xy = rng.uniform(0.0, extent, size=(n_nodes, 2))
    nodes = [store.add_location(f"N{i}", float(x), float(y)) for i, (x, y) in enumerate(xy)]

    links = rng.random((n_nodes, n_nodes)) < edge_prob
    weights = rng.integers(0, max_cost + 1, size=(n_nodes, n_nodes))
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if not links[i, j]:
                continue
            a, b = nodes[i], nodes[j]
            c = float(weights[i, j]) if cost == "integer" else a.loc.distance_to(b.loc)
            store.add_connection(a.id, b.id, c)
    return store
