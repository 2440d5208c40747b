"""
Search worker for pathfinder.

A worker owns one chunk of the root listing. It tests every entry against the
query and walks each directory it owns depth-first, sequentially, without any
further fan-out.
"""

import logging
import threading
from typing import Dict, List, Optional, Iterator

from ..models.config import SearchConfig
from ..models.entry import Entry
from .lister import list_directory
from .stream import ResultStream


logger = logging.getLogger(__name__)


class SearchWorker:
    """
    Walks one chunk of entries and publishes every match to the result stream.

    Entries are visited in pre-order: an entry is tested before its children,
    and a directory's subtree is finished before its next sibling is visited.
    An explicit stack keeps arbitrarily deep trees clear of the recursion limit.
    """

    def __init__(
        self,
        chunk: List[Entry],
        config: SearchConfig,
        stream: ResultStream,
        cancel_event: Optional[threading.Event] = None
    ):
        """
        Initialize the worker.

        Args:
            chunk: Entries owned by this worker
            config: Shared, read-only search configuration
            stream: Stream that receives matches
            cancel_event: When set, the worker stops at the next step
        """
        self.chunk = chunk
        self.config = config
        self.stream = stream
        self.cancel_event = cancel_event
        self.warnings: List[str] = []
        self._stats = {
            'entries_scanned': 0,
            'directories_traversed': 0,
            'matches': 0,
            'errors': 0
        }

    def _cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def run(self) -> None:
        """Visit the chunk and every subtree below it."""
        pending: List[Iterator[Entry]] = [iter(self.chunk)]

        while pending:
            entry = next(pending[-1], None)
            if entry is None:
                pending.pop()
                continue

            if self._cancelled():
                logger.debug("Worker cancelled")
                return

            self._stats['entries_scanned'] += 1

            if entry.matches(self.config.query):
                if self._cancelled():
                    return
                self.stream.publish(entry)
                self._stats['matches'] += 1

            if entry.is_directory():
                try:
                    children = list_directory(entry.path)
                except Exception as e:
                    message = f"Error getting subpaths for {entry.path}: {e}"
                    logger.warning(message)
                    self.warnings.append(message)
                    self._stats['errors'] += 1
                    continue

                self._stats['directories_traversed'] += 1
                pending.append(iter(children))

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the traversal performed by this worker.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()
