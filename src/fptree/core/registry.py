from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class IndexRegistry(Generic[T]):
    """
    Ordered, de-duplicated sequence of values seen during one render.

    The first time a value is passed to ``index_of`` it is appended; later
    calls return the same position.
    """

    def __init__(self) -> None:
        self._values: List[T] = []
        self._positions: Dict[T, int] = {}

    def index_of(self, value: T) -> int:
        position = self._positions.get(value)
        if position is None:
            position = len(self._values)
            self._values.append(value)
            self._positions[value] = position
        return position

    @property
    def values(self) -> List[T]:
        return list(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._positions

    def __len__(self) -> int:
        return len(self._values)


@dataclass
class RenderContext:
    queries: IndexRegistry[int] = field(default_factory=IndexRegistry)
    responses: IndexRegistry[str] = field(default_factory=IndexRegistry)
    nodes_rendered: int = 0

    def query_index(self, query: int) -> int:
        return self.queries.index_of(query)

    def response_index(self, signature: str) -> int:
        return self.responses.index_of(signature)

    def summary(self) -> Dict[str, int]:
        return {
            "nodes": self.nodes_rendered,
            "queries": len(self.queries),
            "responses": len(self.responses),
        }
