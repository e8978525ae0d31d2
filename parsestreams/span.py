"""Streams whose positions are spans from a start to an end position."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from .errors import Errors


@dataclass(frozen=True, order=True)
class Span:
    """A stretch of input from ``start`` to ``end``."""

    start: Any
    end: Any

    @classmethod
    def at(cls, position: Any) -> Span:
        """An empty span that starts and ends at ``position``."""
        return cls(position, position)

    def map(self, f: Callable[[Any], Any]) -> Span:
        return Span(f(self.start), f(self.end))


def _as_span(position: Any) -> Span:
    return position if isinstance(position, Span) else Span.at(position)


class SpanStream:
    """Forwards to ``stream`` and reports positions as :class:`Span` values."""

    def __init__(self, stream: Any) -> None:
        self.stream = stream

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpanStream):
            return NotImplemented
        return self.stream == other.stream

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SpanStream({self.stream!r})"

    @contextmanager
    def _spanned(self) -> Iterator[None]:
        try:
            yield
        except Errors as err:
            if isinstance(err.position, Span):
                raise
            raise err.map_position(_as_span) from err

    def uncons(self) -> Any:
        with self._spanned():
            return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def position(self) -> Span:
        return _as_span(self.stream.position())

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        with self._spanned():
            self.stream.reset(checkpoint)

    def uncons_range(self, size: int) -> Any:
        with self._spanned():
            return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        with self._spanned():
            return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        with self._spanned():
            return self.stream.uncons_while1(predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()