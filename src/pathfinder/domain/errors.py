"""Exceptions raised by the graph store, the map reader and the session."""


class GraphError(Exception):
    """Base exception for graph operations."""


class UnknownNodeError(GraphError, LookupError):
    """Raised when an identifier does not name a registered node."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Unknown node '{node_id}'")


class DuplicateNodeError(GraphError, ValueError):
    """Raised when a node identifier is registered twice."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' is already registered")


class InvalidCostError(GraphError, ValueError):
    """Raised for negative or non-finite edge costs."""

    def __init__(self, origin: str, destination: str, cost: float):
        self.origin, self.destination, self.cost = origin, destination, cost
        super().__init__(f"Edge {origin}->{destination} has invalid cost {cost!r}")


class EmptyGraphError(GraphError):
    """Raised by the session when a query runs before any map is loaded."""

    def __init__(self):
        super().__init__("No map loaded")


class MapFormatError(GraphError, ValueError):
    """Raised when a map description cannot be parsed."""

    def __init__(self, line_no: int, reason: str):
        self.line_no, self.reason = line_no, reason
        super().__init__(f"line {line_no}: {reason}")
