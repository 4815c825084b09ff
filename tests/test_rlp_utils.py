"""
Tests for the RLP prefix grammar, item decoding and canonical encoding
"""
import pytest

from rlp_import.parsing import (
    BufferUnderflow, NonCanonicalLength, decode_item, encode_item, encode_uint, peek_item_length
)
from rlp_import.parsing.rlp_utils import read_prefix
from rlp_import.parsing.schema import decode_uint


@pytest.mark.parametrize("data, expected", [
    (b"\x00", b"\x00"),
    (b"\x7f", b"\x7f"),
    (b"\x80", b""),
    (b"\x81\x80", b"\x80"),
    (b"\x83dog", b"dog"),
    (b"\xb8\x38" + b"a" * 56, b"a" * 56),
    (b"\xb9\x01\x00" + b"z" * 256, b"z" * 256),
])
def test_decode_string_forms(data, expected):
    item, consumed = decode_item(data)

    assert not item.is_list
    assert item.as_bytes() == expected
    assert consumed == len(data)


def test_decode_lists():
    item, consumed = decode_item(b"\xc8\x83cat\x83dog")

    assert item.is_list
    assert [child.as_bytes() for child in item.children] == [b"cat", b"dog"]
    assert [child.offset for child in item.children] == [1, 5]
    assert consumed == 9

    empty, _ = decode_item(b"\xc0")
    assert empty.is_list and empty.children == []


def test_decode_long_list_and_nesting():
    payload = [b"x" * 30, [b"y" * 30, []]]
    data = encode_item(payload)
    assert data[0] == 0xf8

    item, consumed = decode_item(data)
    assert consumed == len(data)
    inner = item.children[1]
    assert inner.is_list
    assert inner.children[0].as_bytes() == b"y" * 30
    assert inner.children[1].children == []


def test_decode_stops_after_one_item():
    item, consumed = decode_item(b"\x83dog\x83cat")
    assert item.as_bytes() == b"dog"
    assert consumed == 4

    second, _ = decode_item(b"\x83dog\x83cat", consumed)
    assert second.offset == 4
    assert second.as_bytes() == b"cat"


@pytest.mark.parametrize("data", [
    b"\x81\x05",                          # single byte with a length prefix
    b"\x81\x00",
    b"\xb8\x05hello",                     # long form for a short string
    b"\xb9\x00\x40" + b"a" * 64,          # leading zero in length-of-length
    b"\xf8\x02\x01\x02",                  # long form for a short list
    b"\xf9\x00\x40" + b"\x01" * 64,
])
def test_non_canonical_lengths(data):
    with pytest.raises(NonCanonicalLength) as exc_info:
        decode_item(data)
    assert exc_info.value.offset == 0


def test_non_canonical_child_reports_child_offset():
    with pytest.raises(NonCanonicalLength) as exc_info:
        decode_item(b"\xc6\x83dog\x81\x05")
    assert exc_info.value.offset == 4


@pytest.mark.parametrize("data, needed, available", [
    (b"\x83ab", 4, 3),
    (b"\xb8", 2, 1),
    (b"\xb9\x01", 3, 2),
    (b"\xc3\x01", 4, 2),
])
def test_buffer_underflow(data, needed, available):
    with pytest.raises(BufferUnderflow) as exc_info:
        decode_item(data)
    error = exc_info.value
    assert error.offset == 0
    assert error.needed == needed
    assert error.available == available


def test_empty_buffer_underflows():
    with pytest.raises(BufferUnderflow):
        decode_item(b"")


def test_child_cannot_overrun_parent():
    # Parent list holds 2 payload bytes, child claims 3
    data = b"\xc2\x83ab"
    with pytest.raises(BufferUnderflow) as exc_info:
        decode_item(data)
    assert exc_info.value.offset == 1


def test_read_prefix_bounds():
    assert read_prefix(b"\x05", 0, 1) == (False, 0, 1)
    assert read_prefix(b"\x83dog", 0, 4) == (False, 1, 3)
    assert read_prefix(b"\xf9\x01\x00", 0, 3) == (True, 3, 256)


@pytest.mark.parametrize("data, expected", [
    (b"", None),
    (b"\x05", 1),
    (b"\x83d", 4),
    (b"\xf9\x01", None),
    (b"\xf9\x01\x00", 259),
])
def test_peek_item_length(data, expected):
    assert peek_item_length(data) == expected


def test_peek_item_length_at_end_of_input():
    assert peek_item_length(b"\xf9\x01\x00", final=True) == 259
    with pytest.raises(BufferUnderflow) as exc_info:
        peek_item_length(b"\xf9\x01", final=True)
    assert (exc_info.value.needed, exc_info.value.available) == (3, 2)


@pytest.mark.parametrize("value", [
    0, 1, 127, 128, 255, 256, 1024, 2 ** 64 - 1, 2 ** 128 - 1, 2 ** 256 - 1,
])
def test_integer_round_trip(value):
    encoded = encode_uint(value)
    item, consumed = decode_item(encoded)

    assert consumed == len(encoded)
    assert decode_uint(item.payload, 256) == value


def test_integer_encodings():
    assert encode_uint(0) == b"\x80"
    assert encode_uint(15) == b"\x0f"
    assert encode_uint(1024) == b"\x82\x04\x00"


def test_encode_item_rejects_unknown_types():
    with pytest.raises(TypeError):
        encode_item("text")
    with pytest.raises(ValueError):
        encode_uint(-1)


def test_decoding_leaves_input_untouched():
    data = bytearray(encode_item([b"abc", [b"\x01", b""]]))
    snapshot = bytes(data)
    decode_item(data)
    assert bytes(data) == snapshot
