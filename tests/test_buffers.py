import io

import pytest

from parsestreams.buf_reader import BufReader
from parsestreams.buffers import Buffer, Bufferless

DATA = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 0])


def test_bufferless_extend_buf():
    read = BufReader(io.BytesIO(DATA), 3)
    assert Bufferless().extend_buf(read) == 3
    assert read.buffer() == bytes([1, 2, 3])
    assert Bufferless().extend_buf(read) == 7
    assert read.buffer() == bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 0])


def test_bufferless_data_and_advance():
    read = BufReader(io.BytesIO(DATA), 3)
    strategy = Bufferless()
    strategy.extend_buf(read)
    assert strategy.data(read) == DATA[:3]
    strategy.advance(read, 2)
    assert strategy.data(read) == DATA[2:3]
    assert read.buffer() == DATA[2:3]


def test_bufferless_rejects_plain_reader():
    with pytest.raises(TypeError):
        Bufferless().extend_buf(io.BytesIO(DATA))


def test_buffer_extend_reads_everything_available():
    strategy = Buffer()
    assert strategy.data() == b""
    assert strategy.extend_buf(io.BytesIO(DATA)) == len(DATA)
    assert strategy.data() == DATA


def test_buffer_extend_at_end_returns_zero():
    strategy = Buffer()
    reader = io.BytesIO(DATA)
    strategy.extend_buf(reader)
    assert strategy.extend_buf(reader) == 0
    assert strategy.data() == DATA


def test_buffer_advance():
    strategy = Buffer()
    strategy.extend_buf(io.BytesIO(DATA))
    strategy.advance(None, 4)
    assert strategy.data() == DATA[4:]


def test_buffer_advance_past_end():
    strategy = Buffer()
    strategy.extend_buf(io.BytesIO(DATA))
    with pytest.raises(ValueError):
        strategy.advance(None, len(DATA) + 1)