"""Where a decoder keeps the bytes it has read but not yet parsed."""

from __future__ import annotations

from typing import Any

from .buf_reader import BufReader, _ReadBuffer, extend_buf


class Buffer:
    """Keeps read bytes in a buffer owned by the decoder itself.

    Any object with a ``read(size)`` method can be read from; bytes that
    were read but not parsed stay in this buffer.
    """

    def __init__(self) -> None:
        self._buf = _ReadBuffer()

    def __repr__(self) -> str:
        return f"Buffer({bytes(self._buf)!r})"

    def data(self, reader: Any = None) -> bytes:
        """The buffered bytes; ``reader`` is not consulted."""
        return bytes(self._buf)

    def advance(self, reader: Any, length: int) -> None:
        """Drop ``length`` parsed bytes from the front of the buffer."""
        self._buf.advance(length)

    def extend_buf(self, reader: Any) -> int:
        """Read once from ``reader`` into the buffer; return the byte count."""
        return extend_buf(self._buf, reader)


class Bufferless:
    """Keeps no bytes itself and uses the buffer of a :class:`BufReader`."""

    def __repr__(self) -> str:
        return "Bufferless()"

    @staticmethod
    def _check(reader: Any) -> BufReader:
        if not isinstance(reader, BufReader):
            raise TypeError(
                f"a bufferless decoder needs a BufReader, not {type(reader).__name__}"
            )
        return reader

    def data(self, reader: BufReader) -> bytes:
        """The bytes buffered in ``reader``."""
        return self._check(reader).buffer()

    def advance(self, reader: BufReader, length: int) -> None:
        """Drop ``length`` parsed bytes from the front of the reader's buffer."""
        self._check(reader).consume(length)

    def extend_buf(self, reader: BufReader) -> int:
        """Read once into the reader's buffer; return the byte count."""
        reader = self._check(reader)
        return extend_buf(reader._buf, reader.inner)