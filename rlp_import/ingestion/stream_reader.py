"""Incremental reader for files of concatenated top-level RLP blocks"""

from enum import Enum
from typing import Iterable, Iterator, Optional

from ..parsing.block_parser import BlockParser
from ..parsing.errors import BlockImportError, BufferUnderflow
from ..parsing.records import Block
from ..parsing.rlp_utils import decode_item, peek_item_length

# Prefix byte plus at most 8 length bytes
MAX_PREFIX_LENGTH = 9
COMPACT_THRESHOLD = 1024 * 1024


class ReaderState(Enum):
    IDLE = "idle"
    DECODING = "decoding"
    EMITTED = "emitted"
    AWAITING_INPUT = "awaiting_input"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class BlockStreamReader:
    """
    Decodes blocks one top-level item at a time

    The input has no enclosing list and no item count: every block's extent
    comes from its own length prefix, and decoding resumes exactly where the
    previous block ended. Bytes may be fed incrementally; next_block() returns
    None while the buffered bytes cannot complete the next item.
    """

    def __init__(self, parser: Optional[BlockParser] = None):
        self.parser = parser or BlockParser()
        self.state = ReaderState.IDLE
        self.error: Optional[BlockImportError] = None
        self.blocks_emitted = 0
        self._buffer = bytearray()
        self._pos = 0
        self._base_offset = 0
        self._closed = False

    @classmethod
    def from_bytes(cls, data: bytes, parser: Optional[BlockParser] = None) -> "BlockStreamReader":
        """Reader over a fully buffered input"""
        reader = cls(parser)
        reader.feed(data)
        reader.close()
        return reader

    @property
    def cursor(self) -> int:
        """Absolute offset of the next undecoded byte"""
        return self._base_offset + self._pos

    @property
    def buffered(self) -> int:
        return len(self._buffer) - self._pos

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def finished(self) -> bool:
        return self.state in (ReaderState.EXHAUSTED, ReaderState.FAILED)

    def feed(self, data: bytes) -> None:
        """Append input bytes"""
        if self._closed:
            raise ValueError("Cannot feed a closed reader")
        self._buffer += data

    def close(self) -> None:
        """Mark the end of input; an incomplete trailing item becomes an error"""
        self._closed = True

    def next_block(self) -> Optional[Block]:
        """
        Decode the next block

        Returns:
            The next Block, or None when input is exhausted at an item
            boundary or more bytes are needed (see state)

        Raises:
            BlockImportError: Malformed input; the reader stays failed
        """
        if self.state is ReaderState.FAILED:
            raise self.error
        if self.state is ReaderState.EXHAUSTED:
            return None

        self.state = ReaderState.DECODING
        available = self.buffered
        if available == 0:
            self.state = ReaderState.EXHAUSTED if self._closed else ReaderState.AWAITING_INPUT
            return None

        start = self.cursor
        try:
            total = self._next_item_length(available)
            if total is None:
                self.state = ReaderState.AWAITING_INPUT
                return None
            item_data = bytes(self._buffer[self._pos:self._pos + total])
            item, _ = decode_item(item_data)
            block = self.parser.parse_item(item)
        except BlockImportError as e:
            self.state = ReaderState.FAILED
            self.error = e.shift(start)
            raise

        self._pos += total
        self.blocks_emitted += 1
        self.state = ReaderState.EMITTED
        self._compact()
        return block

    def drain(self) -> Iterator[Block]:
        """Yield every block that the bytes fed so far can complete"""
        while True:
            block = self.next_block()
            if block is None:
                return
            yield block

    def __iter__(self) -> Iterator[Block]:
        return self.drain()

    def consume(self, chunks: Iterable[bytes]) -> Iterator[Block]:
        """Feed chunks from a byte source, yielding blocks as soon as they complete"""
        for chunk in chunks:
            self.feed(chunk)
            yield from self.drain()
        self.close()
        yield from self.drain()

    def _next_item_length(self, available: int) -> Optional[int]:
        # Offsets in raised errors are relative to the item start
        head = bytes(self._buffer[self._pos:self._pos + MAX_PREFIX_LENGTH])
        total = peek_item_length(head, final=self._closed)
        if total is None:
            return None

        if total > available:
            if not self._closed:
                return None
            raise BufferUnderflow(total, available, 0)
        return total

    def _compact(self) -> None:
        if self._pos == len(self._buffer) or self._pos >= COMPACT_THRESHOLD:
            del self._buffer[:self._pos]
            self._base_offset += self._pos
            self._pos = 0


def read_blocks(chunks: Iterable[bytes], parser: Optional[BlockParser] = None) -> Iterator[Block]:
    """Decode all blocks from an iterable of byte chunks"""
    return BlockStreamReader(parser).consume(chunks)
