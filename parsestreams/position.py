"""Streams that track the position of the tokens taken from them."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, NamedTuple

from .read import EndOfInputError, UnexpectedParse

_NEWLINES = ("\n", ord("\n"), b"\n")


@dataclass
class IndexPositioner:
    """Counts the tokens taken; a range advances it by its length."""

    index: int = 0

    def position(self) -> int:
        return self.index

    def update(self, token: Any) -> None:
        self.index += 1

    def update_range(self, items: Sequence[Any]) -> None:
        self.index += len(items)

    def checkpoint(self) -> IndexPositioner:
        return IndexPositioner(self.index)

    def reset(self, checkpoint: IndexPositioner) -> None:
        self.index = checkpoint.index


@dataclass(order=True)
class SourcePosition:
    """A line and column in a source text, both starting at 1."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"line: {self.line}, column: {self.column}"

    def position(self) -> SourcePosition:
        return replace(self)

    def update(self, token: Any) -> None:
        self.column += 1
        if token in _NEWLINES:
            self.column = 1
            self.line += 1

    def update_range(self, items: Sequence[Any]) -> None:
        for token in items:
            self.update(token)

    def checkpoint(self) -> SourcePosition:
        return replace(self)

    def reset(self, checkpoint: SourcePosition) -> None:
        self.line = checkpoint.line
        self.column = checkpoint.column


def default_positioner(stream: Any) -> IndexPositioner | SourcePosition:
    """Return the positioner used for ``stream`` when none is given."""
    if isinstance(stream, str):
        return SourcePosition()
    return IndexPositioner()


class _SequenceStream:
    """A resettable stream over an in-memory sequence."""

    __slots__ = ("items", "offset")

    def __init__(self, items: Sequence[Any], offset: int = 0) -> None:
        self.items = items
        self.offset = offset

    def _remaining(self) -> Sequence[Any]:
        return self.items[self.offset:]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _SequenceStream):
            return NotImplemented
        return self._remaining() == other._remaining()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._remaining())

    def uncons(self) -> Any:
        if self.offset >= len(self.items):
            raise EndOfInputError()
        token = self.items[self.offset]
        self.offset += 1
        return token

    def is_partial(self) -> bool:
        return False

    def checkpoint(self) -> int:
        return self.offset

    def reset(self, checkpoint: int) -> None:
        self.offset = checkpoint

    def uncons_range(self, size: int) -> Sequence[Any]:
        end = self.offset + size
        if end > len(self.items):
            raise EndOfInputError()
        result = self.items[self.offset:end]
        self.offset = end
        return result

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Sequence[Any]:
        end = self.offset
        while end < len(self.items) and predicate(self.items[end]):
            end += 1
        result = self.items[self.offset:end]
        self.offset = end
        return result

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Sequence[Any]:
        at_end = self.offset >= len(self.items)
        result = self.uncons_while(predicate)
        if not result:
            raise EndOfInputError() if at_end else UnexpectedParse()
        return result

    def distance(self, end: int) -> int:
        return self.offset - end

    def range(self) -> Sequence[Any]:
        return self._remaining()


class _Checkpoint(NamedTuple):
    input: Any
    positioner: Any


class PositionStream:
    """Wraps a stream and updates a positioner for every token taken.

    Strings, bytes, lists and other sequences are accepted directly as input.
    """

    def __init__(self, input: Any, positioner: Any = None) -> None:
        if positioner is None:
            positioner = default_positioner(input)
        if isinstance(input, Sequence):
            input = _SequenceStream(input)
        self.input = input
        self.positioner = positioner

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionStream):
            return NotImplemented
        return self.input == other.input and self.positioner == other.positioner

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PositionStream({self.input!r}, {self.positioner!r})"

    def uncons(self) -> Any:
        token = self.input.uncons()
        self.positioner.update(token)
        return token

    def is_partial(self) -> bool:
        return self.input.is_partial()

    def position(self) -> Any:
        return self.positioner.position()

    def checkpoint(self) -> _Checkpoint:
        return _Checkpoint(self.input.checkpoint(), self.positioner.checkpoint())

    def reset(self, checkpoint: _Checkpoint) -> None:
        self.input.reset(checkpoint.input)
        self.positioner.reset(checkpoint.positioner)

    def uncons_range(self, size: int) -> Any:
        items = self.input.uncons_range(size)
        self.positioner.update_range(items)
        return items

    def _tracking(self, predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
        def accept(token: Any) -> bool:
            if predicate(token):
                self.positioner.update(token)
                return True
            return False

        return accept

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        return self.input.uncons_while(self._tracking(predicate))

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        return self.input.uncons_while1(self._tracking(predicate))

    def distance(self, end: _Checkpoint) -> int:
        return self.input.distance(end.input)

    def range(self) -> Any:
        return self.input.range()