"""
Completion coordinator for pathfinder.

Tracks how many workers are still running and closes the result stream once
the last one has finished.
"""

import threading
import logging
from typing import Callable, List, Optional

from .stream import ResultStream


logger = logging.getLogger(__name__)


class CompletionCoordinator:
    """
    Counts running workers and closes the result stream when all are done.

    Workers are started through spawn(), which increments the count before the
    thread starts. The stream is closed only after seal() was called, meaning no
    more workers will be spawned, and the count is back to zero.
    """

    def __init__(self, stream: ResultStream):
        """
        Initialize the coordinator.

        Args:
            stream: The stream to close once every worker has finished
        """
        self.stream = stream
        self._condition = threading.Condition()
        self._running = 0
        self._spawned = 0
        self._sealed = False
        self._threads: List[threading.Thread] = []
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> int:
        """Number of workers that have not finished yet."""
        with self._condition:
            return self._running

    @property
    def spawned(self) -> int:
        """Total number of workers started."""
        return self._spawned

    def spawn(self, target: Callable[[], object], name: Optional[str] = None) -> threading.Thread:
        """
        Start a worker thread and count it as running.

        Args:
            target: Callable run by the worker thread
            name: Optional thread name

        Returns:
            The started thread

        Raises:
            RuntimeError: If the coordinator has been sealed
        """
        with self._condition:
            if self._sealed:
                raise RuntimeError("Cannot spawn a worker after the coordinator was sealed")
            self._running += 1
            self._spawned += 1

        thread = threading.Thread(target=self._run_worker, args=(target,), name=name, daemon=True)
        self._threads.append(thread)
        thread.start()
        return thread

    def _run_worker(self, target: Callable[[], object]) -> None:
        try:
            target()
        finally:
            with self._condition:
                self._running -= 1
                self._condition.notify_all()

    def seal(self) -> None:
        """Declare that no further workers will be spawned."""
        with self._condition:
            self._sealed = True
            self._condition.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the coordinator is sealed and no worker is running.

        Returns:
            True if all workers finished, False on timeout
        """
        with self._condition:
            return self._condition.wait_for(
                lambda: self._sealed and self._running == 0,
                timeout=timeout
            )

    def _close_when_done(self) -> None:
        self.wait()
        if self.stream.close():
            logger.debug(f"All {self._spawned} workers finished, stream closed")

    def start(self) -> threading.Thread:
        """Run the coordinator in a background thread."""
        self._thread = threading.Thread(target=self._close_when_done, name="coordinator", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the coordinator thread and every worker thread to exit."""
        for thread in self._threads:
            thread.join(timeout)
        if self._thread is not None:
            self._thread.join(timeout)
