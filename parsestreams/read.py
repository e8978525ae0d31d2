"""A byte stream read one token at a time from a binary reader."""

from __future__ import annotations

from typing import Any, BinaryIO


class ReadError(Exception):
    """Base class of the errors a :class:`ReadStream` raises."""

    _comparable = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadError):
            return NotImplemented
        return self._comparable and type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class UnexpectedParse(ReadError):
    """A token or range that could not be parsed."""

    def __init__(self, message: str = "unexpected parse") -> None:
        super().__init__(message)


class EndOfInputError(ReadError):
    """The input ended before a token could be taken."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class ReadIOError(ReadError):
    """The underlying reader failed; never equal to any other error."""

    _comparable = False

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


class ReadStream:
    """Takes single bytes from any object with a ``read(size)`` method.

    It can neither report positions nor be reset; wrap it in a positioning
    and a buffering stream to parse from it.
    """

    def __init__(self, reader: BinaryIO | Any) -> None:
        self.reader = reader

    def uncons(self) -> int:
        """Return the next byte as an int, or raise a :class:`ReadError`."""
        while True:
            try:
                chunk = self.reader.read(1)
            except InterruptedError:
                continue
            except OSError as err:
                raise ReadIOError(err) from err
            break
        if not chunk:
            raise EndOfInputError()
        return chunk[0]

    def is_partial(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"ReadStream({self.reader!r})"