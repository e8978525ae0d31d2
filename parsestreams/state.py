"""A stream that carries a user state alongside another stream."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class StateStream:
    """Forwards every stream operation to ``stream``; ``state`` is left to the user."""

    stream: Any
    state: Any

    def uncons(self) -> Any:
        return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def position(self) -> Any:
        return self.stream.position()

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        self.stream.reset(checkpoint)

    def uncons_range(self, size: int) -> Any:
        return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        return self.stream.uncons_while1(predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()