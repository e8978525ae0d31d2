import io

import pytest

from parsestreams.position import PositionStream
from parsestreams.read import EndOfInputError, ReadStream, UnexpectedParse
from parsestreams.state import StateStream

TEXT = "ab\ncd ef"


def _pair():
    return StateStream(PositionStream(TEXT), state={"count": 0}), PositionStream(TEXT)


def test_uncons_matches_inner_stream():
    wrapped, plain = _pair()
    for _ in TEXT:
        assert wrapped.uncons() == plain.uncons()
        assert wrapped.position() == plain.position()
    with pytest.raises(EndOfInputError):
        wrapped.uncons()


def test_range_operations_match_inner_stream():
    wrapped, plain = _pair()
    assert wrapped.uncons_range(3) == plain.uncons_range(3)
    assert wrapped.uncons_while(str.isalpha) == plain.uncons_while(str.isalpha)
    assert wrapped.position() == plain.position()
    assert wrapped.range() == plain.range()


def test_uncons_while1_error_propagates():
    wrapped, _ = _pair()
    with pytest.raises(UnexpectedParse):
        wrapped.uncons_while1(str.isdigit)


def test_checkpoint_reset_and_distance():
    wrapped, _ = _pair()
    start = wrapped.checkpoint()
    taken = wrapped.uncons_range(4)
    assert wrapped.distance(start) == len(taken)
    wrapped.reset(start)
    assert wrapped.distance(start) == 0
    assert wrapped.uncons_range(4) == taken


def test_state_is_kept_and_mutable():
    wrapped, _ = _pair()
    wrapped.state["count"] += 1
    wrapped.uncons()
    assert wrapped.state == {"count": 1}


def test_equality_compares_stream_and_state():
    assert StateStream(PositionStream("xy"), 1) == StateStream(PositionStream("xy"), 1)
    assert StateStream(PositionStream("xy"), 1) != StateStream(PositionStream("xy"), 2)


def test_is_partial_forwards():
    wrapped = StateStream(ReadStream(io.BytesIO(b"z")), None)
    assert wrapped.is_partial() is False
    assert wrapped.uncons() == b"z"[0]