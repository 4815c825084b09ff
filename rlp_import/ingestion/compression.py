import os
import zlib
from typing import Iterable, Iterator

import snappy

from ..config.settings import DEFAULT_CHUNK_SIZE

SNAPPY_FRAME_MAGIC = b'\xff\x06\x00\x00sNaPpY'
GZIP_MAGIC = b'\x1f\x8b'

COMPRESSION_SUFFIXES = {
    '.gz': 'gzip',
    '.gzip': 'gzip',
    '.sz': 'snappy',
    '.snappy': 'snappy',
}

def detect_compression(path: str) -> str:
    """Compression of a block file judged from its name: gzip, snappy or none"""
    lowered = path.lower()
    for suffix, compression in COMPRESSION_SUFFIXES.items():
        if lowered.endswith(suffix):
            return compression
    return 'none'

def sniff_compression(head: bytes) -> str:
    """Compression judged from the first bytes of a file"""
    if head.startswith(SNAPPY_FRAME_MAGIC):
        return 'snappy'
    if head.startswith(GZIP_MAGIC):
        return 'gzip'
    return 'none'

def decompress_gzip_stream(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """
    Incrementally decompress gzip data, including multi-member files

    Raises:
        ValueError: If the stream is truncated or corrupt
    """
    decompressor = zlib.decompressobj(16 + zlib.MAX_WBITS)
    in_member = False
    for chunk in chunks:
        while chunk:
            if not in_member:
                # Zero padding may follow any member
                chunk = chunk.lstrip(b'\x00')
                if not chunk:
                    break
                in_member = True
            try:
                output = decompressor.decompress(chunk)
            except zlib.error as e:
                raise ValueError(f"Failed to decompress gzip data: {e}") from e
            if output:
                yield output
            if decompressor.eof:
                # Next gzip member starts in the unused tail
                chunk = decompressor.unused_data
                decompressor = zlib.decompressobj(16 + zlib.MAX_WBITS)
                in_member = False
            else:
                chunk = b''

    if in_member:
        raise ValueError("Truncated gzip stream")

def decompress_snappy_stream(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """
    Incrementally decompress snappy framed data

    Raises:
        ValueError: If the stream is truncated or corrupt
    """
    decompressor = snappy.StreamDecompressor()
    for chunk in chunks:
        try:
            output = decompressor.decompress(chunk)
        except Exception as e:
            raise ValueError(f"Failed to decompress snappy framed data: {e}") from e
        if output:
            yield output
    try:
        decompressor.flush()
    except Exception as e:
        raise ValueError(f"Truncated snappy framed stream: {e}") from e

def decompress_chunks(chunks: Iterable[bytes], compression: str) -> Iterator[bytes]:
    """Wrap a chunk iterator with the matching decompressor"""
    if compression == 'gzip':
        return decompress_gzip_stream(chunks)
    if compression == 'snappy':
        return decompress_snappy_stream(chunks)
    if compression == 'none':
        return iter(chunks)
    raise ValueError(f"Unknown compression: {compression}")

def iter_file_chunks(filepath: str, chunk_size: int = DEFAULT_CHUNK_SIZE,
                     compression: str = None) -> Iterator[bytes]:
    """
    Read a block file as decompressed byte chunks

    Args:
        filepath: Path to the block file
        chunk_size: Bytes read from disk per chunk
        compression: Override detection ('gzip', 'snappy' or 'none'); by default
            the file suffix decides, then the magic bytes
    """
    if compression is None:
        compression = detect_compression(filepath)
        if compression == 'none' and os.path.getsize(filepath) > 0:
            # Top-level blocks start with a list prefix, so magic bytes cannot collide
            with open(filepath, "rb") as f:
                compression = sniff_compression(f.read(len(SNAPPY_FRAME_MAGIC)))
    return decompress_chunks(_read_raw_chunks(filepath, chunk_size), compression)

def _read_raw_chunks(filepath: str, chunk_size: int) -> Iterator[bytes]:
    with open(filepath, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk
