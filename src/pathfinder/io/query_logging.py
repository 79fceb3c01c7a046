# io/query_logging.py
import json
import logging
import sys

from pathfinder.runtime.hooks import NoopHooks


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record; hook payloads travel in record.extra."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {"level": record.levelname, "msg": record.getMessage(), "logger": record.name}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


class _SysStreamHandler(logging.StreamHandler):
    """Writes to sys.stdout / sys.stderr as they are at emit time."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(getattr(sys, target))

    def emit(self, record):
        self.stream = getattr(sys, self.target)
        super().emit(record)


def _default_json_logger(name="pathfinder", level="INFO", stream="stdout"):
    logger = logging.getLogger(name if stream == "stdout" else f"{name}.{stream}")
    if not logger.handlers:
        h = _SysStreamHandler(stream)
        h.setFormatter(_JsonLineFormatter())
        logger.addHandler(h)
        logger.propagate = False
    logger.setLevel(level)
    return logger


class QueryLogging(NoopHooks):
    """
    Structured logs for map reloads and engine queries.
    Per-node / per-edge step lines are only emitted with debug=True.
    """

    def __init__(
        self,
        session: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        stream: str = "stdout",
    ):
        self.session, self.debug = session, debug
        self.log = logger or _default_json_logger(level=level, stream=stream)
        self.queries = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"session": self.session}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # queries

    def query_start(self, *, query: str, **kw):
        self.queries += 1
        if self.debug:
            self._emit("DEBUG", "query_start", query=query, seq=self.queries, **kw)

    def query_end(self, *, query: str, wall_ms: float, **kw):
        self._emit("INFO", query, seq=self.queries, wall_ms=round(wall_ms, 3), **kw)

    def step(self, *, query: str, **kw):
        if self.debug:
            self._emit("DEBUG", "step", query=query, seq=self.queries, **kw)

    def error(self, *, query: str, exc: BaseException, **kw):
        self._emit(
            "ERROR", "query_error", query=query, error=str(exc), exc_type=type(exc).__name__, **kw
        )

    # map lifecycle

    def reload_start(self, *, source: str):
        self._emit("INFO", "reload_start", source=source)

    def reload_end(self, *, source: str, nodes: int, edges: int, wall_ms: float):
        self._emit(
            "INFO", "reload_end", source=source, nodes=nodes, edges=edges, wall_ms=round(wall_ms, 3)
        )
