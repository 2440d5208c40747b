"""
Result stream for pathfinder.

A single unbounded conduit carrying matched entries from many concurrent
workers to exactly one collector.
"""

import queue
import threading
import logging
from typing import Iterator

from ..models.entry import Entry


logger = logging.getLogger(__name__)

_END_OF_STREAM = object()


class StreamClosedError(Exception):
    """Raised when an entry is published after the stream was closed."""
    pass


class ResultStream:
    """
    Many-writer, one-reader stream of matched entries.

    The stream is either open, in which case workers may publish, or closed.
    Closing enqueues an end marker behind every entry already published, so the
    reader always drains the backlog before it stops.
    """

    def __init__(self):
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._published = 0

    @property
    def closed(self) -> bool:
        """Whether the stream has been closed."""
        return self._closed

    @property
    def published(self) -> int:
        """Number of entries accepted by the stream."""
        return self._published

    def publish(self, entry: Entry) -> None:
        """
        Publish a matched entry.

        Args:
            entry: Entry to hand to the collector

        Raises:
            StreamClosedError: If the stream is already closed
        """
        with self._lock:
            if self._closed:
                raise StreamClosedError(f"Cannot publish {entry.path}: stream is closed")
            self._published += 1
            self._queue.put(entry)

    def close(self) -> bool:
        """
        Close the stream. Repeated calls have no further effect.

        Returns:
            True if this call closed the stream, False if it was already closed
        """
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            self._queue.put(_END_OF_STREAM)

        logger.debug(f"Result stream closed after {self._published} entries")
        return True

    def __iter__(self) -> Iterator[Entry]:
        """Yield entries in arrival order until the stream is closed and drained."""
        while True:
            item = self._queue.get()
            if item is _END_OF_STREAM:
                return
            yield item
