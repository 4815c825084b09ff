import time
from typing import Iterator, Optional
from urllib.parse import urlparse

import requests

from ..config.settings import DEFAULT_CHUNK_SIZE, DecoderConfig
from .compression import decompress_chunks, detect_compression


class RemoteSourceError(RuntimeError):
    """Download cannot continue"""


class RemoteBlockSource:
    """Streams a block file over HTTP as byte chunks"""

    def __init__(self, url: str, chunk_size: int = DEFAULT_CHUNK_SIZE, timeout: int = 30,
                 max_retries: int = 3, session: Optional[requests.Session] = None):
        """
        Initialize remote block source

        Args:
            url: HTTP(S) URL of a block file (raw, .gz or .sz)
            chunk_size: Bytes requested per chunk
            timeout: Connect/read timeout in seconds
            max_retries: Attempts per connection before giving up
            session: Optional requests session to reuse
        """
        self.url = url
        self.chunk_size = chunk_size
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': 'rlp-import/1.0'})
        self.bytes_downloaded = 0
        self.compression = detect_compression(urlparse(url).path)

    @classmethod
    def from_config(cls, url: str, config: DecoderConfig) -> "RemoteBlockSource":
        return cls(url, chunk_size=config.chunk_size, max_retries=config.max_retries)

    def iter_raw_chunks(self) -> Iterator[bytes]:
        """
        Yield the response body as it arrives

        A dropped connection is resumed with a Range request from the last
        byte received, retrying with exponential backoff.
        """
        attempt = 0
        while True:
            headers = {}
            if self.bytes_downloaded:
                headers['Range'] = f'bytes={self.bytes_downloaded}-'
            try:
                with self.session.get(self.url, stream=True, timeout=self.timeout,
                                      headers=headers) as response:
                    response.raise_for_status()
                    if self.bytes_downloaded and response.status_code != 206:
                        raise RemoteSourceError(
                            f"Server ignored range request after {self.bytes_downloaded} bytes"
                        )
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            self.bytes_downloaded += len(chunk)
                            attempt = 0
                            yield chunk
                return
            except requests.RequestException as e:
                attempt += 1
                print(f"   ❌ Download attempt {attempt}/{self.max_retries} failed: {e}")
                if attempt >= self.max_retries:
                    print(f"   ❌ All download attempts failed")
                    raise
                time.sleep(2 ** (attempt - 1))

    def iter_chunks(self) -> Iterator[bytes]:
        """Decompressed byte chunks"""
        print(f"🌐 Streaming {self.url}")
        return decompress_chunks(self.iter_raw_chunks(), self.compression)
