# pathfinder/io/maps.py
"""
Map description files.

    <background image>
    NODES
    <name> <x> <y>
    ...
    ARCS
    <connection line>
    ...

Node lines are always whitespace separated. Connection lines come in two
layouts: ``standard`` (``A B COST``) and ``columnar``, where the second city
and the cost start at fixed columns.
"""

from dataclasses import dataclass, field

from pathfinder.app.protocols import MapReader
from pathfinder.domain.errors import MapFormatError
from pathfinder.domain.store import GraphStore

NODES_HEADER = "NODES"
ARCS_HEADER = "ARCS"


@dataclass(frozen=True)
class NodeRecord:
    id: str
    x: float
    y: float


@dataclass(frozen=True)
class ConnectionRecord:
    a: str
    b: str
    cost: float


@dataclass
class MapDescription:
    background: str
    nodes: list[NodeRecord] = field(default_factory=list)
    connections: list[ConnectionRecord] = field(default_factory=list)


def _number(token: str, line_no: int, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise MapFormatError(line_no, f"{what} {token!r} is not a number") from None


class StandardReader(MapReader):
    def parse_connection(self, line, line_no):
        parts = line.split()
        if len(parts) < 3:
            raise MapFormatError(line_no, f"expected 'A B COST', got {line!r}")
        return parts[0], parts[1], _number(parts[2], line_no, "cost")


class ColumnarReader(MapReader):
    def __init__(self, second_city_col: int = 15, cost_col: int = 30):
        if cost_col <= second_city_col:
            raise ValueError("cost_col must come after second_city_col")
        self.second_city_col, self.cost_col = second_city_col, cost_col

    def parse_connection(self, line, line_no):
        first = line.split(" ", 1)[0]
        second = line[self.second_city_col :].split()
        cost = line[self.cost_col :].split()
        if not first or not second or not cost:
            raise MapFormatError(line_no, f"connection line too short: {line!r}")
        return first, second[0], _number(cost[0], line_no, "cost")


def read_map(text: str, reader: MapReader) -> MapDescription:
    lines = [(i, ln.rstrip()) for i, ln in enumerate(text.splitlines(), start=1)]
    lines = [(i, ln) for i, ln in lines if ln.strip()]
    if not lines:
        raise MapFormatError(1, "empty map description")

    it = iter(lines)
    _, background = next(it)
    desc = MapDescription(background=background.strip())

    line_no, header = next(it, (lines[-1][0] + 1, ""))
    if header.strip() != NODES_HEADER:
        raise MapFormatError(line_no, f"expected {NODES_HEADER!r}, got {header!r}")

    section = NODES_HEADER
    for line_no, line in it:
        if line.strip() == ARCS_HEADER:
            section = ARCS_HEADER
            continue
        if section == NODES_HEADER:
            parts = line.split()
            if len(parts) != 3:
                raise MapFormatError(line_no, f"expected 'NAME X Y', got {line!r}")
            name, x, y = parts
            desc.nodes.append(
                NodeRecord(name, _number(x, line_no, "x"), _number(y, line_no, "y"))
            )
        else:
            desc.connections.append(ConnectionRecord(*reader.parse_connection(line, line_no)))

    if section != ARCS_HEADER:
        raise MapFormatError(lines[-1][0], f"missing {ARCS_HEADER!r} section")
    return desc


def populate(store: GraphStore, desc: MapDescription) -> None:
    """Register every node, then every connection (both directions)."""
    for n in desc.nodes:
        store.add_location(n.id, n.x, n.y)
    for c in desc.connections:
        store.add_connection(c.a, c.b, c.cost)
