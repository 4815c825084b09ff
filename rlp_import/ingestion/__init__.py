from .stream_reader import BlockStreamReader, ReaderState, read_blocks
from .compression import (
    detect_compression, sniff_compression, decompress_chunks, iter_file_chunks
)
from .remote_source import RemoteBlockSource, RemoteSourceError

__all__ = [
    "BlockStreamReader",
    "ReaderState",
    "read_blocks",
    "detect_compression",
    "sniff_compression",
    "decompress_chunks",
    "iter_file_chunks",
    "RemoteBlockSource",
    "RemoteSourceError"
]
