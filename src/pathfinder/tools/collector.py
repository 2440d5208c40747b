"""
Collector for pathfinder.

Drains the result stream, owns the match set and forwards each match to the
output sink in arrival order.
"""

import logging
import threading
from typing import List, Optional

from ..models.entry import Entry
from .sinks import EmissionError, ResultSink
from .stream import ResultStream


logger = logging.getLogger(__name__)


class Collector:
    """
    Single reader of the result stream.

    The collector is the only writer of the match set. The match set is handed
    to the caller through wait(), after the stream was closed and drained.
    """

    def __init__(self, stream: ResultStream, sink: ResultSink):
        """
        Initialize the collector.

        Args:
            stream: Stream to drain
            sink: Output that receives every match
        """
        self.stream = stream
        self.sink = sink
        self.warnings: List[str] = []
        self._matches: List[Entry] = []
        self._done = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def done(self) -> bool:
        """Whether the collector has drained a closed stream."""
        return self._done.is_set()

    def run(self) -> None:
        """Read until the stream is closed, then signal completion."""
        try:
            for entry in self.stream:
                self._matches.append(entry)
                try:
                    self.sink.emit(entry)
                except EmissionError as e:
                    logger.warning(str(e))
                    self.warnings.append(str(e))
        finally:
            self._done.set()

    def start(self) -> threading.Thread:
        """Run the collector in a background thread."""
        self._thread = threading.Thread(target=self.run, name="collector", daemon=True)
        self._thread.start()
        return self._thread

    def wait(self, timeout: Optional[float] = None) -> List[Entry]:
        """
        Block until the collector has finished.

        Args:
            timeout: Maximum seconds to wait (forever if None)

        Returns:
            The finalized match set

        Raises:
            TimeoutError: If the collector did not finish in time
        """
        if not self._done.wait(timeout):
            raise TimeoutError("Collector did not finish in time")
        return list(self._matches)
