import io

import pytest

from parsestreams.buffered import BacktrackError, BufferedStream
from parsestreams.position import PositionStream
from parsestreams.read import EndOfInputError, ReadStream


def make(text, lookahead):
    return BufferedStream(PositionStream(text), lookahead)


def test_reads_bytes_from_reader():
    stream = BufferedStream(PositionStream(ReadStream(io.BytesIO(b"123,"))), 1)
    taken = [stream.uncons() for _ in range(4)]
    assert bytes(taken) == b"123,"
    with pytest.raises(EndOfInputError):
        stream.uncons()


def test_replay_within_lookahead():
    stream = make("abcdef", 3)
    stream.uncons()
    saved = stream.checkpoint()
    saved_position = stream.position()
    first = [stream.uncons(), stream.uncons()]
    assert first == ["b", "c"]
    stream.reset(saved)
    assert stream.position() == saved_position
    assert [stream.uncons(), stream.uncons(), stream.uncons()] == ["b", "c", "d"]


def test_position_follows_replayed_tokens():
    stream = make("ab\ncd", 5)
    positions = []
    for _ in range(4):
        positions.append(stream.position())
        stream.uncons()
    stream.reset(0)
    replayed = []
    for _ in range(4):
        replayed.append(stream.position())
        stream.uncons()
    assert replayed == positions


def test_reset_past_buffer_raises():
    stream = make("abcdef", 2)
    start = stream.checkpoint()
    for _ in range(4):
        stream.uncons()
    with pytest.raises(BacktrackError, match="Backtracked to far"):
        stream.reset(start)


def test_oldest_buffered_token_can_still_be_replayed():
    stream = make("abcdef", 2)
    for _ in range(2):
        stream.uncons()
    mark = stream.checkpoint()
    stream.uncons()
    stream.uncons()
    stream.reset(mark)
    assert stream.uncons() == "c"


def test_is_partial_forwards():
    assert make("abc", 1).is_partial() is False