"""
Search tools for pathfinder.

This module contains the components of the parallel search pipeline: the
directory lister, the partitioner, the search workers, the result stream, the
collector and the completion coordinator.
"""

from .fs_walker import PathSearch, SearchState, search
from .lister import RootError, list_directory, list_root
from .partition import partition
from .sinks import EmissionError, JsonSink, TextSink, make_sink
from .stream import ResultStream, StreamClosedError

__all__ = [
    'PathSearch',
    'SearchState',
    'search',
    'RootError',
    'list_directory',
    'list_root',
    'partition',
    'EmissionError',
    'JsonSink',
    'TextSink',
    'make_sink',
    'ResultStream',
    'StreamClosedError'
]
