"""
Parallel path search for pathfinder.

This module wires the pipeline together: the root is listed once, its entries
are split into chunks, one worker thread walks each chunk while the collector
drains matches concurrently, and the completion coordinator closes the stream
once every worker is done.
"""

import time
import random
import logging
import threading
from enum import Enum
from typing import List, Optional

from ..models.config import SearchConfig
from ..models.entry import Entry
from ..models.search_results import SearchResults
from .collector import Collector
from .coordinator import CompletionCoordinator
from .lister import RootError, list_root
from .partition import partition
from .sinks import CollectingSink, ResultSink
from .stream import ResultStream
from .worker import SearchWorker


logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Phases of a search, in the order they are entered."""
    PENDING = "pending"
    LISTING_ROOT = "listing_root"
    PARTITIONING = "partitioning"
    SEARCHING = "searching"
    DRAINING = "draining"
    DONE = "done"
    FATAL = "fatal"


class PathSearch:
    """
    Parallel substring search over the paths of a directory tree.

    Parallelism is one level deep: only the root listing is partitioned, and
    each worker walks its subtrees sequentially. A PathSearch runs once.
    """

    def __init__(
        self,
        config: SearchConfig,
        sink: Optional[ResultSink] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the search.

        Args:
            config: Immutable search configuration
            sink: Output for matches as they arrive (kept in memory if None)
            rng: Random generator for the chunk count
        """
        self.config = config
        self.sink = sink or CollectingSink()
        self.rng = rng
        self.state = SearchState.PENDING
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Ask all workers to stop at their next step."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> SearchResults:
        """
        Execute the search and wait for it to finish.

        Returns:
            SearchResults with the match set and traversal statistics

        Raises:
            RootError: If the root is a file or cannot be listed
            RuntimeError: If the search has already been run
        """
        if self.state != SearchState.PENDING:
            raise RuntimeError("A PathSearch can only be run once")

        start = time.monotonic()

        self.state = SearchState.LISTING_ROOT
        try:
            entries = list_root(self.config.root)
        except RootError:
            self.state = SearchState.FATAL
            raise

        self.state = SearchState.PARTITIONING
        chunks = partition(entries, self.rng)
        logger.info(f"Searching {len(entries)} root entries with {len(chunks)} workers")

        self.state = SearchState.SEARCHING
        stream = ResultStream()
        coordinator = CompletionCoordinator(stream)
        collector = Collector(stream, self.sink)
        workers = self._spawn_workers(chunks, coordinator, stream)

        collector.start()
        coordinator.start()

        matches = collector.wait()
        self.state = SearchState.DRAINING
        coordinator.join()
        self.state = SearchState.DONE

        elapsed_ms = int((time.monotonic() - start) * 1000)
        return self._build_results(matches, workers, collector, len(chunks), elapsed_ms)

    def _spawn_workers(
        self,
        chunks: List[List[Entry]],
        coordinator: CompletionCoordinator,
        stream: ResultStream
    ) -> List[SearchWorker]:
        workers = []
        for index, chunk in enumerate(chunks):
            worker = SearchWorker(chunk, self.config, stream, self._cancel_event)
            workers.append(worker)
            coordinator.spawn(worker.run, name=f"worker-{index}")
        coordinator.seal()
        return workers

    def _build_results(
        self,
        matches: List[Entry],
        workers: List[SearchWorker],
        collector: Collector,
        chunk_count: int,
        elapsed_ms: int
    ) -> SearchResults:
        totals = {'entries_scanned': 0, 'directories_traversed': 0, 'errors': 0}
        warnings = []
        for worker in workers:
            stats = worker.get_stats()
            for key in totals:
                totals[key] += stats[key]
            warnings.extend(worker.warnings)

        warnings.extend(collector.warnings)
        totals['errors'] += len(collector.warnings)

        return SearchResults(
            config=self.config,
            matches=matches,
            elapsed_ms=elapsed_ms,
            chunk_count=chunk_count,
            warnings=warnings,
            cancelled=self.cancelled,
            **totals
        )


def search(
    root: str,
    query: str,
    as_json: bool = False,
    sink: Optional[ResultSink] = None,
    rng: Optional[random.Random] = None
) -> SearchResults:
    """
    Convenience function to run a single search.

    Args:
        root: Directory to search
        query: Case-sensitive path substring
        as_json: Recorded output mode
        sink: Output for matches (kept in memory if None)
        rng: Random generator for the chunk count

    Returns:
        SearchResults for the search

    Raises:
        RootError: If the root is a file or cannot be listed
    """
    config = SearchConfig(root=root, query=query, as_json=as_json)
    return PathSearch(config, sink=sink, rng=rng).run()
