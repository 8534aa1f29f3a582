import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from ftlib.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)

data_st = st.binary(max_size=64)
text_st = st.binary(max_size=32).map(lambda b: b.replace(b"\0", b"x"))


@given(data_st, st.integers(min_value=0, max_value=255), st.data())
def test_memset_fills_prefix_only(data, value, draw):
    length = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    result = memset(buf, value, length)
    assert result is buf
    assert buf[:length] == bytes([value]) * length
    assert buf[length:] == data[length:]


@given(data_st, st.integers(min_value=0, max_value=255))
def test_memset_value_is_taken_modulo_256(data, value):
    plain = memset(bytearray(data), value, len(data))
    wrapped = memset(bytearray(data), value + 256, len(data))
    assert plain == wrapped


def test_memset_rejects_length_beyond_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)


@given(data_st, st.data())
def test_bzero_zeroes_prefix(data, draw):
    length = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    bzero(buf, length)
    assert not any(buf[:length])
    assert buf[length:] == data[length:]


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_calloc_is_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


@given(data_st, data_st)
def test_memcpy_copies_prefix(src, original):
    length = min(len(src), len(original))
    dest = bytearray(original)
    result = memcpy(dest, src, length)
    assert result is dest
    assert dest[:length] == src[:length]
    assert dest[length:] == original[length:]


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


@given(st.binary(min_size=1, max_size=40), st.data())
def test_memmove_handles_overlap(data, draw):
    size = len(data)
    dest = draw.draw(st.integers(min_value=0, max_value=size))
    src = draw.draw(st.integers(min_value=0, max_value=size))
    length = draw.draw(st.integers(min_value=0, max_value=size - max(dest, src)))
    buf = bytearray(data)
    memmove(buf, dest, src, length)
    assert buf[dest:dest + length] == data[src:src + length]
    assert buf[:dest] == data[:dest]
    assert buf[dest + length:] == data[dest + length:]


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


@given(data_st, st.integers(min_value=0, max_value=255))
def test_memchr_finds_first_occurrence(data, value):
    index = memchr(data, value, len(data))
    if value in data:
        assert data[index] == value
        assert value not in data[:index]
    else:
        assert index is None


@given(data_st)
def test_memcmp_equal_buffers(data):
    assert memcmp(data, bytearray(data), len(data)) == 0


@given(data_st, data_st)
def test_memcmp_is_antisymmetric(first, second):
    size = min(len(first), len(second))
    assert memcmp(first, second, size) == -memcmp(second, first, size)
    assert (memcmp(first, second, size) == 0) == (first[:size] == second[:size])


@given(data_st, data_st)
def test_memcmp_sign_matches_byte_order(first, second):
    size = min(len(first), len(second))
    result = memcmp(first, second, size)
    a, b = first[:size], second[:size]
    assert (result < 0) == (a < b)
    assert (result > 0) == (a > b)


def test_memcmp_zero_size():
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


@given(text_st, st.integers(min_value=1, max_value=40))
def test_strlcpy_truncates_and_terminates(src, size):
    dest = bytearray(b"\xff" * 40)
    result = strlcpy(dest, src, size)
    assert result == len(src)
    copied = min(len(src), size - 1)
    assert dest[:copied] == src[:copied]
    assert dest[copied] == 0
    assert dest[copied + 1:] == b"\xff" * (40 - copied - 1)


def test_strlcpy_stops_at_nul_in_source():
    dest = bytearray(10)
    assert strlcpy(dest, b"ab\0cd", len(dest)) == len(b"ab")
    assert dest[:3] == b"ab\0"


def test_strlcpy_size_zero_writes_nothing():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"hello", 0) == len(b"hello")
    assert dest == bytearray(b"keep")


@given(text_st, text_st)
def test_strlcat_concatenates_when_room(head, tail):
    dest = bytearray(head + b"\0" + bytes(len(tail) + 4))
    result = strlcat(dest, tail, len(dest))
    assert result == len(head) + len(tail)
    joined = head + tail
    assert dest[:len(joined) + 1] == joined + b"\0"


@given(text_st, text_st, st.data())
def test_strlcat_truncates(head, tail, draw):
    dest = bytearray(head + b"\0" + bytes(len(tail) + 4))
    size = draw.draw(st.integers(min_value=len(head) + 1, max_value=len(dest)))
    result = strlcat(dest, tail, size)
    assert result == len(head) + len(tail)
    written = (head + tail)[:size - 1]
    assert dest[:len(written) + 1] == written + b"\0"


@given(text_st, text_st, st.data())
def test_strlcat_size_not_beyond_dest_string(head, tail, draw):
    original = head + b"\0" + b"\xff" * 4
    dest = bytearray(original)
    size = draw.draw(st.integers(min_value=0, max_value=len(head)))
    assert strlcat(dest, tail, size) == len(tail) + size
    assert dest == bytearray(original)


def test_strlcat_rejects_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcat(bytearray(b"ab\0"), b"cd", 10)