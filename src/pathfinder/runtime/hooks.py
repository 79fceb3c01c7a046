# runtime/hooks.py
from typing import Protocol


class QueryHooks(Protocol):
    def query_start(self, *, query: str, **kw): ...
    def query_end(self, *, query: str, wall_ms: float, **kw): ...
    def step(self, *, query: str, **kw): ...
    def reload_start(self, *, source: str): ...
    def reload_end(self, *, source: str, nodes: int, edges: int, wall_ms: float): ...
    def error(self, *, query: str, exc: BaseException, **kw): ...


class NoopHooks:
    def query_start(self, **_):
        pass

    def query_end(self, **_):
        pass

    def step(self, **_):
        pass

    def reload_start(self, **_):
        pass

    def reload_end(self, **_):
        pass

    def error(self, **_):
        pass
