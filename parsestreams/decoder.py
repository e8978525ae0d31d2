"""Incremental decoding state: buffered input, position and end of input."""

from __future__ import annotations

from typing import Any

from .buffers import Buffer, Bufferless
from .errors import Error, Errors


class DecodeIOError(Exception):
    """Reading input for a decoder failed at ``position``."""

    def __init__(self, position: Any, error: BaseException) -> None:
        super().__init__(str(error))
        self.position = position
        self.error = error

    def __str__(self) -> str:
        return str(self.error)

    def into_easy(self) -> Errors:
        """Describe this failure as :class:`Errors` at the same position."""
        return Errors.single(self.position, Error.other(self.error))


class Decoder:
    """Keeps what is needed to decode a stream piece by piece.

    ``buffer`` is either a :class:`Buffer`, which stores read bytes in the
    decoder, or a :class:`Bufferless`, which relies on a ``BufReader``.
    """

    def __init__(self, buffer: Buffer | Bufferless | None = None) -> None:
        self._buffer = Buffer() if buffer is None else buffer
        self._position: Any = 0
        self.state: Any = None
        self.end_of_input = False

    def __repr__(self) -> str:
        return (
            f"Decoder({self._buffer!r}, position={self._position!r}, "
            f"end_of_input={self.end_of_input!r})"
        )

    @classmethod
    def new_buffer(cls) -> Decoder:
        """A decoder with its own buffer; any reader can be used."""
        return cls(Buffer())

    @classmethod
    def new_bufferless(cls) -> Decoder:
        """A decoder without a buffer; the reader must be a ``BufReader``."""
        return cls(Bufferless())

    def buffer(self) -> bytes:
        """Bytes read but not yet parsed, for a decoder with its own buffer."""
        if not isinstance(self._buffer, Buffer):
            raise TypeError("a bufferless decoder keeps no bytes of its own")
        return self._buffer.data()

    def advance(self, reader: Any, removed: int) -> None:
        """Drop ``removed`` parsed bytes from whichever buffer holds them."""
        self._buffer.advance(reader, removed)

    def position(self) -> Any:
        return self._position

    def before_parse(self, reader: Any) -> None:
        """Read more input; a read of nothing marks the end of input."""
        try:
            copied = self._buffer.extend_buf(reader)
        except OSError as err:
            raise DecodeIOError(self._position, err) from err
        if copied == 0:
            self.end_of_input = True