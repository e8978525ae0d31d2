"""Input streams for parsers: positions, backtracking, readable errors and decoding buffers."""

__version__ = "0.1.0"

__all__ = [
    "buf_reader",
    "buffered",
    "buffers",
    "decoder",
    "easy",
    "errors",
    "position",
    "read",
    "span",
    "state",
]