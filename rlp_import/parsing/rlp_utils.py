from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import BufferUnderflow, NonCanonicalLength

# Prefix byte ranges
SINGLE_BYTE_MAX = 0x7F
SHORT_STRING_PREFIX = 0x80
LONG_STRING_BASE = 0xB7
SHORT_LIST_PREFIX = 0xC0
LONG_LIST_BASE = 0xF7
SHORT_MAX_LEN = 55

Buffer = Union[bytes, bytearray, memoryview]


@dataclass
class RlpItem:
    """One decoded RLP item: a byte string or a list of items"""
    offset: int
    length: int
    payload: Optional[memoryview] = None
    children: Optional[List["RlpItem"]] = None

    @property
    def is_list(self) -> bool:
        return self.children is not None

    @property
    def kind(self) -> str:
        return "list" if self.is_list else "string"

    def as_bytes(self) -> bytes:
        return bytes(self.payload)


def read_be_uint(data: Buffer, offset: int, size: int) -> int:
    """Read big-endian unsigned integer of `size` bytes at offset"""
    return int.from_bytes(bytes(data[offset:offset + size]), "big")


def read_prefix(data: Buffer, offset: int, end: int) -> Tuple[bool, int, int]:
    """
    Parse the prefix of the item starting at offset

    Args:
        data: Encoded bytes
        offset: Position of the prefix byte
        end: Exclusive bound the item must fit in

    Returns:
        (is_list, header_length, payload_length)

    Raises:
        BufferUnderflow: Prefix bytes are missing
        NonCanonicalLength: Prefix is not minimal
    """
    if offset >= end:
        raise BufferUnderflow(1, 0, offset)

    first = data[offset]

    if first <= SINGLE_BYTE_MAX:
        return False, 0, 1

    if first < SHORT_LIST_PREFIX:
        is_list = False
        short_base, long_base = SHORT_STRING_PREFIX, LONG_STRING_BASE
    else:
        is_list = True
        short_base, long_base = SHORT_LIST_PREFIX, LONG_LIST_BASE

    if first <= long_base:
        payload_length = first - short_base
        if not is_list and payload_length == 1:
            if offset + 1 >= end:
                raise BufferUnderflow(2, end - offset, offset)
            if data[offset + 1] <= SINGLE_BYTE_MAX:
                raise NonCanonicalLength(
                    f"single byte 0x{data[offset + 1]:02x} must not carry a length prefix", offset
                )
        return is_list, 1, payload_length

    length_of_length = first - long_base
    if offset + 1 + length_of_length > end:
        raise BufferUnderflow(1 + length_of_length, end - offset, offset)
    if data[offset + 1] == 0:
        raise NonCanonicalLength("length-of-length has a leading zero byte", offset)

    payload_length = read_be_uint(data, offset + 1, length_of_length)
    if payload_length <= SHORT_MAX_LEN:
        raise NonCanonicalLength(
            f"long form used for {payload_length}-byte payload", offset
        )
    return is_list, 1 + length_of_length, payload_length


def peek_item_length(data: Buffer, offset: int = 0, final: bool = False) -> Optional[int]:
    """
    Total encoded length of the item at offset, judged from its prefix alone

    Returns None if the buffer ends before the prefix does. With final set
    no more bytes can follow, so a cut-off prefix raises BufferUnderflow.
    """
    try:
        _, header_length, payload_length = read_prefix(data, offset, len(data))
    except BufferUnderflow:
        if final:
            raise
        return None
    return header_length + payload_length


def _decode_at(view: memoryview, offset: int, end: int) -> RlpItem:
    is_list, header_length, payload_length = read_prefix(view, offset, end)
    total = header_length + payload_length
    if offset + total > end:
        raise BufferUnderflow(total, end - offset, offset)

    start = offset + header_length
    if not is_list:
        return RlpItem(offset, total, payload=view[start:start + payload_length])

    children = []
    pos = start
    stop = start + payload_length
    while pos < stop:
        child = _decode_at(view, pos, stop)
        children.append(child)
        pos += child.length
    return RlpItem(offset, total, children=children)


def decode_item(data: Buffer, offset: int = 0) -> Tuple[RlpItem, int]:
    """
    Decode exactly one item starting at offset

    Args:
        data: Encoded bytes (never modified; string payloads are views into it)
        offset: Start position

    Returns:
        (item, bytes consumed)
    """
    view = memoryview(data)
    item = _decode_at(view, offset, len(view))
    return item, item.length


def encode_uint(value: int) -> bytes:
    """Canonical RLP encoding of a non-negative integer"""
    if value < 0:
        raise ValueError("RLP integers must be non-negative")
    if value == 0:
        return encode_item(b"")
    return encode_item(value.to_bytes((value.bit_length() + 7) // 8, "big"))


def _encode_length(length: int, short_base: int, long_base: int) -> bytes:
    if length <= SHORT_MAX_LEN:
        return bytes([short_base + length])
    length_bytes = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([long_base + len(length_bytes)]) + length_bytes


def encode_item(value) -> bytes:
    """
    Canonical RLP encoding of bytes, ints or (nested) lists of those

    Used for round trips and fixtures; the import path only decodes.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return encode_uint(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value)
        if len(value) == 1 and value[0] <= SINGLE_BYTE_MAX:
            return value
        return _encode_length(len(value), SHORT_STRING_PREFIX, LONG_STRING_BASE) + value
    if isinstance(value, (list, tuple)):
        payload = b"".join(encode_item(child) for child in value)
        return _encode_length(len(payload), SHORT_LIST_PREFIX, LONG_LIST_BASE) + payload
    raise TypeError(f"Cannot RLP-encode {type(value).__name__}")
