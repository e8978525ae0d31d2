"""A stream that makes a one-pass stream resettable within a limited window."""

from __future__ import annotations

from collections import deque
from typing import Any


class BacktrackError(Exception):
    """A reset or replay went further back than the buffer remembers."""

    def __init__(self, position: Any = None, message: str = "Backtracked to far") -> None:
        super().__init__(message)
        self.position = position


class BufferedStream:
    """Buffers the last ``lookahead`` tokens of ``stream`` so they can be replayed.

    ``stream`` needs ``uncons``, ``position`` and ``is_partial``. Resetting past
    what the buffer holds raises :class:`BacktrackError`.
    """

    def __init__(self, stream: Any, lookahead: int) -> None:
        self.stream = stream
        self._offset = 0
        self._buffer_offset = 0
        self._buffer: deque[tuple[Any, Any]] = deque(maxlen=lookahead)

    def _oldest_offset(self) -> int:
        return self._buffer_offset - len(self._buffer)

    def checkpoint(self) -> int:
        return self._offset

    def reset(self, checkpoint: int) -> None:
        if checkpoint < self._oldest_offset():
            raise BacktrackError(self.position())
        self._offset = checkpoint

    def position(self) -> Any:
        if self._offset >= self._buffer_offset:
            return self.stream.position()
        if self._offset < self._oldest_offset():
            return self._buffer[0][1]
        return self._buffer[len(self._buffer) - (self._buffer_offset - self._offset)][1]

    def uncons(self) -> Any:
        if self._offset >= self._buffer_offset:
            position = self.stream.position()
            token = self.stream.uncons()
            self._buffer_offset += 1
            self._buffer.append((token, position))
            self._offset += 1
            return token
        if self._offset < self._oldest_offset():
            raise BacktrackError()
        token = self._buffer[len(self._buffer) - (self._buffer_offset - self._offset)][0]
        self._offset += 1
        return token

    def is_partial(self) -> bool:
        return self.stream.is_partial()