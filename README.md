# parsestreams

Input streams for building parsers. Every stream hands out one token at a
time through `uncons()`. Streams wrap one another to add position
tracking, backtracking, a user state, start/end spans or readable error
reports. A buffered reader and a `Decoder` support decoding from a
binary source in chunks.

## Installation

```
pip install parsestreams
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "parsestreams[test]"
pytest
```

## The stream operations

Streams share a small set of method names. Each wrapper forwards the
operations that the stream it wraps supports:

- `uncons()` takes the next token.
- `is_partial()` tells whether more input may still arrive.
- `position()` reports where the stream is.
- `checkpoint()` and `reset(checkpoint)` save a place and return to it.
- `uncons_range(size)`, `uncons_while(predicate)` and
  `uncons_while1(predicate)` take several tokens at once.
- `distance(end)` and `range()` describe how far the stream has moved
  and what is left.

## Modules

| Module | What it provides |
| --- | --- |
| `parsestreams.read` | `ReadStream`, which takes one byte at a time (as an `int`) from any object with a `read(size)` method. It raises `EndOfInputError` at the end of input and `ReadIOError` when the reader raises `OSError`. Both, with `UnexpectedParse`, are subclasses of `ReadError`. |
| `parsestreams.position` | `PositionStream`, which updates a positioner for every token taken. Strings, bytes, lists and other sequences are accepted as input directly and can be reset. The positioners are `IndexPositioner` (a token count) and `SourcePosition` (line and column, from 1). `default_positioner(stream)` gives `SourcePosition` for a `str` and `IndexPositioner` for anything else. |
| `parsestreams.state` | `StateStream`, a dataclass that forwards every operation to `stream` and carries a `state` value for the user. |
| `parsestreams.errors` | `Errors` (an exception holding a position and a list of `Error`s), `Error`, `ErrorKind`, `Info`, `InfoKind` and `format_errors`. |
| `parsestreams.buffered` | `BufferedStream`, which remembers the last `lookahead` tokens of a one-pass stream so they can be replayed. Resetting further back than that raises `BacktrackError`. |
| `parsestreams.easy` | `EasyStream`, which re-raises `ReadError` and `BacktrackError` as `Errors` at the stream's position, and `to_easy_error`, which describes such a failure as an `Error`. |
| `parsestreams.span` | `Span` (`start`, `end`; `Span.at(position)`, `map(f)`) and `SpanStream`, which reports positions as spans and gives the `Errors` it passes on a `Span` position. |
| `parsestreams.buf_reader` | `BufReader`, a buffered reader with `buffer()`, `fill_buf()`, `consume(amount)`, `read(size)` and `into_inner()`, and `extend_buf`, which reads once into a buffer's spare room. |
| `parsestreams.buffers` | `Buffer`, which keeps read bytes itself, and `Bufferless`, which uses the buffer of a `BufReader` and raises `TypeError` for any other reader. |
| `parsestreams.decoder` | `Decoder`, which holds the buffer, a `position`, a user `state` and an `end_of_input` flag, and `DecodeIOError`, raised by `before_parse` when the reader raises `OSError`. |

## Examples

### Reading with backtracking

Read bytes from a binary source, count their index and allow one token of
backtracking:

```python
import io

from parsestreams.buffered import BufferedStream
from parsestreams.position import IndexPositioner, PositionStream
from parsestreams.read import ReadStream

stream = BufferedStream(
    PositionStream(ReadStream(io.BytesIO(b"123,")), IndexPositioner(0)),
    1,
)
checkpoint = stream.checkpoint()
assert stream.uncons() == ord("1")
stream.reset(checkpoint)
assert stream.uncons() == ord("1")
```

### Positions in text

```python
from parsestreams.position import PositionStream, SourcePosition

stream = PositionStream("ab\ncd")
stream.uncons_range(4)
assert stream.position() == SourcePosition(line=2, column=2)
```

### Readable error messages

`Errors` collects everything that went wrong at one position. Equal
errors are added only once; `merge` keeps the errors furthest ahead.

```python
from parsestreams.errors import Error, Errors

err = Errors.single(0, Error.unexpected_token(","))
err.add_error(Error.expected_token("."))
err.add_error(Error.expected_message("digit"))
print(err)
# Parse error at 0
# Unexpected `,`
# Expected `.` or digit
```

### Incremental decoding

`Decoder.before_parse` reads one more chunk from a reader. `buffer()`
holds the bytes not yet parsed, and `advance` drops the parsed ones. A
read that returns nothing sets `end_of_input`.

```python
import io

from parsestreams.decoder import Decoder

decoder = Decoder.new_buffer()
reader = io.BytesIO(b"hello")
decoder.before_parse(reader)
assert decoder.buffer() == b"hello"
decoder.advance(reader, 2)
assert decoder.buffer() == b"llo"
decoder.before_parse(reader)
assert decoder.end_of_input
```

With `Decoder.new_bufferless()` the bytes stay in a `BufReader` instead,
and the decoder must be given that `BufReader` as its reader.

## What this package does not do

It provides streams, errors and buffering only. There are no parser
combinators in it: nothing here matches tokens, builds results or drives
a `Decoder` through a parse. Reading is synchronous; there is no
asynchronous reader support.