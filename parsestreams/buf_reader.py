"""A buffered reader whose buffer can be grown and consumed by a decoder."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 8096
_RESERVE = 8 * 1024


class _ReadBuffer:
    """Bytes read but not yet consumed, plus room reserved for further reads."""

    __slots__ = ("data", "capacity")

    def __init__(self, capacity: int = 0) -> None:
        self.data = bytearray()
        self.capacity = capacity

    def spare(self) -> int:
        return self.capacity - len(self.data)

    def reserve(self, additional: int) -> None:
        if self.spare() < additional:
            self.capacity = len(self.data) + additional

    def advance(self, length: int) -> None:
        """Drop ``length`` bytes from the front."""
        if length < 0 or length > len(self.data):
            raise ValueError(
                f"cannot advance past the end: {length} > {len(self.data)}"
            )
        del self.data[:length]
        self.capacity -= length

    def clear(self) -> None:
        self.capacity -= len(self.data)
        self.data.clear()

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)


def extend_buf(buf: _ReadBuffer, reader: Any) -> int:
    """Read once from ``reader`` into the spare room of ``buf``.

    Room for another 8 KiB is reserved when ``buf`` is full. Returns the
    number of bytes read; 0 means the reader is at its end.
    """
    if buf.spare() <= 0:
        buf.reserve(_RESERVE)
    room = buf.spare()
    chunk = reader.read(room)
    if chunk is None:
        chunk = b""
    if len(chunk) > room:
        raise ValueError(
            "reader returned more bytes than the buffer had room for"
        )
    buf.data.extend(chunk)
    return len(chunk)


class BufReader:
    """Wraps a binary reader and keeps the bytes read from it in a buffer."""

    def __init__(self, inner: Any, capacity: int = DEFAULT_CAPACITY) -> None:
        self.inner = inner
        self._buf = _ReadBuffer(capacity)

    def __repr__(self) -> str:
        return f"BufReader({self.inner!r}, buffered={bytes(self._buf)!r})"

    def buffer(self) -> bytes:
        """The buffered bytes, without reading more."""
        return bytes(self._buf)

    def read(self, size: int = -1) -> bytes:
        """Return at most ``size`` bytes, refilling the buffer only when empty."""
        available = self.fill_buf()
        if size is None or size < 0:
            size = len(available)
        result = available[:size]
        self.consume(len(result))
        return result

    def fill_buf(self) -> bytes:
        """Return the buffered bytes, reading from the reader if there are none."""
        if not self._buf:
            extend_buf(self._buf, self.inner)
        return bytes(self._buf)

    def consume(self, amount: int) -> None:
        """Mark ``amount`` buffered bytes as used."""
        self._buf.advance(amount)

    def into_inner(self) -> Any:
        """Return the wrapped reader; buffered bytes are discarded."""
        self._buf.clear()
        return self.inner