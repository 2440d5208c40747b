"""
Output sinks for pathfinder.

A sink receives every match from the collector, one at a time, and writes it
either as a "[+] <path>" line or as a JSON record.
"""

import os
import logging
from typing import List, Optional

from pydantic_core import PydanticSerializationError
from rich.console import Console

from ..models.entry import Entry


logger = logging.getLogger(__name__)


class EmissionError(Exception):
    """Raised when a match cannot be written to the output."""
    pass


class ResultSink:
    """Base class for match outputs. Only the collector thread calls emit()."""

    def emit(self, entry: Entry) -> None:
        raise NotImplementedError


def display_path(path: str) -> str:
    """Render undecodable bytes in a path as backslash escapes."""
    return os.fsencode(path).decode('utf-8', 'backslashreplace')


class TextSink(ResultSink):
    """Writes one "[+] <path>" line per match. Paths are printed literally."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(emoji=False)

    def format(self, entry: Entry) -> str:
        return f"[+] {display_path(entry.path)}"

    def emit(self, entry: Entry) -> None:
        self.console.print(self.format(entry), markup=False, highlight=False, emoji=False, soft_wrap=True)


class JsonSink(TextSink):
    """Writes one JSON object per match with the fields name, path and type."""

    def format(self, entry: Entry) -> str:
        try:
            entry.path.encode('utf-8')
            return entry.to_json()
        except (PydanticSerializationError, ValueError) as e:
            raise EmissionError(f"Error marshalling {display_path(entry.path)}: {e}") from e


class CollectingSink(ResultSink):
    """Keeps emitted entries in memory instead of printing them."""

    def __init__(self):
        self.entries: List[Entry] = []

    def emit(self, entry: Entry) -> None:
        self.entries.append(entry)


def make_sink(as_json: bool, console: Optional[Console] = None) -> ResultSink:
    """
    Create the sink selected by the output mode.

    Args:
        as_json: Emit JSON records instead of text lines
        console: Console to write to (stdout if None)

    Returns:
        A JsonSink or a TextSink
    """
    if as_json:
        return JsonSink(console)
    return TextSink(console)
