import io

import pytest

from parsestreams.buf_reader import BufReader
from parsestreams.decoder import DecodeIOError, Decoder
from parsestreams.errors import ErrorKind

DATA = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 0])


class _FailingReader:
    def __init__(self, error):
        self.error = error

    def read(self, size=-1):
        raise self.error


def test_new_decoder_starts_empty():
    decoder = Decoder.new_buffer()
    assert decoder.buffer() == b""
    assert decoder.end_of_input is False
    assert decoder.position() == 0


def test_buffered_decoder_reads_and_advances():
    decoder = Decoder.new_buffer()
    reader = io.BytesIO(DATA)
    decoder.before_parse(reader)
    assert decoder.buffer() == DATA
    assert decoder.end_of_input is False
    decoder.advance(reader, 2)
    assert decoder.buffer() == DATA[2:]


def test_buffered_decoder_marks_end_of_input():
    decoder = Decoder()
    reader = io.BytesIO(DATA)
    decoder.before_parse(reader)
    decoder.before_parse(reader)
    assert decoder.end_of_input is True
    assert decoder.buffer() == DATA


def test_bufferless_decoder_uses_reader_buffer():
    decoder = Decoder.new_bufferless()
    reader = BufReader(io.BytesIO(DATA), 3)
    decoder.before_parse(reader)
    assert reader.buffer() == DATA[:3]
    decoder.before_parse(reader)
    assert reader.buffer() == DATA
    decoder.advance(reader, 1)
    assert reader.buffer() == DATA[1:]


def test_bufferless_decoder_has_no_own_buffer():
    decoder = Decoder.new_bufferless()
    with pytest.raises(TypeError):
        decoder.buffer()


def test_empty_reader_sets_end_of_input():
    decoder = Decoder.new_bufferless()
    decoder.before_parse(BufReader(io.BytesIO(b""), 3))
    assert decoder.end_of_input is True


def test_io_failure_raises_decode_error():
    failure = OSError("disk gone")
    decoder = Decoder.new_buffer()
    with pytest.raises(DecodeIOError) as info:
        decoder.before_parse(_FailingReader(failure))
    assert info.value.error is failure
    assert info.value.position == decoder.position()
    assert str(info.value) == str(failure)
    assert decoder.end_of_input is False


def test_decode_error_into_easy():
    failure = OSError("disk gone")
    easy = DecodeIOError(0, failure).into_easy()
    assert easy.position == 0
    assert len(easy.errors) == 1
    assert easy.errors[0].kind is ErrorKind.OTHER
    assert easy.errors[0].cause is failure