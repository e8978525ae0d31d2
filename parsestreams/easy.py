"""A stream wrapper whose failures are reported as readable :class:`Errors`."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from .buffered import BacktrackError
from .errors import Error, Errors
from .read import EndOfInputError, ReadError, ReadIOError, UnexpectedParse

_STREAM_FAILURES = (ReadError, BacktrackError)


def to_easy_error(err: Any) -> Error:
    """Describe a stream failure as an :class:`Error`."""
    if isinstance(err, Error):
        return err
    if isinstance(err, Errors):
        return err.errors[-1] if err.errors else Error.message("")
    if isinstance(err, ReadIOError):
        return Error.other(err.error)
    if isinstance(err, EndOfInputError):
        return Error.end_of_input()
    if isinstance(err, UnexpectedParse):
        return Error.unexpected_message("parse")
    if isinstance(err, BacktrackError):
        return Error.message(str(err))
    return Error.other(err)


class EasyStream:
    """Forwards to ``stream`` and raises :class:`Errors` for every stream failure.

    ``stream`` must be able to report its position.
    """

    def __init__(self, stream: Any) -> None:
        self.stream = stream

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EasyStream):
            return NotImplemented
        return self.stream == other.stream

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EasyStream({self.stream!r})"

    @contextmanager
    def _reporting(self) -> Iterator[None]:
        position = self.stream.position()
        try:
            yield
        except Errors:
            raise
        except _STREAM_FAILURES as err:
            where = getattr(err, "position", None)
            if where is None:
                where = position
            raise Errors.single(where, to_easy_error(err)) from err

    def uncons(self) -> Any:
        with self._reporting():
            return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def position(self) -> Any:
        return self.stream.position()

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        with self._reporting():
            self.stream.reset(checkpoint)

    def uncons_range(self, size: int) -> Any:
        with self._reporting():
            return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        with self._reporting():
            return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        with self._reporting():
            return self.stream.uncons_while1(predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()