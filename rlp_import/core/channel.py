"""Order-preserving handoff of decoded blocks to a consumer thread"""

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..export.base import BlockConsumer
from ..parsing.records import Block

logger = logging.getLogger(__name__)

_DONE = object()
_POLL_INTERVAL = 0.1


class BlockChannel:
    """
    Bounded single-producer, single-consumer queue

    Blocks reach the consumer in send() order, each exactly once. A consumer
    failure is re-raised in the producer on the next send() or on close().
    """

    def __init__(self, consumer: BlockConsumer, capacity: int = 64):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.consumer = consumer
        self.capacity = capacity
        self.sent = 0
        self._queue = queue.Queue(maxsize=capacity)
        self._abort = threading.Event()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future = None

    def __enter__(self) -> "BlockChannel":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
        else:
            self.abort()
        return False

    def start(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="block-consumer")
        self._future = self._executor.submit(self._run_consumer)
        logger.debug("Block channel started (capacity %d)", self.capacity)

    def send(self, block: Block) -> None:
        """Queue a block, blocking while the channel is full"""
        self._put(block)
        self.sent += 1

    def close(self) -> None:
        """Wait for the consumer to take every queued block"""
        try:
            self._put(_DONE)
            self._future.result()
        finally:
            self._executor.shutdown(wait=True)
        logger.debug("Block channel closed after %d blocks", self.sent)

    def abort(self) -> None:
        """Stop the consumer without delivering queued blocks"""
        self._abort.set()
        self._executor.shutdown(wait=True)
        logger.warning("Block channel aborted after %d blocks", self.sent)

    def _put(self, item) -> None:
        while True:
            if self._future.done():
                # Raises the consumer's exception
                self._future.result()
                raise RuntimeError("Block consumer stopped early")
            try:
                self._queue.put(item, timeout=_POLL_INTERVAL)
                return
            except queue.Full:
                continue

    def _run_consumer(self) -> None:
        while not self._abort.is_set():
            try:
                item = self._queue.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            if item is _DONE:
                return
            try:
                self.consumer.consume(item)
            except Exception:
                logger.exception("Block consumer failed")
                raise
