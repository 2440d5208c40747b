"""
Search results data model for pathfinder.

This module defines the finalized outcome of a search: the match set in the
order the collector received it, plus timing, traversal statistics and the
warnings reported along the way.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field

from .config import SearchConfig
from .entry import Entry


class SearchResults(BaseModel):
    """
    Complete results from a search operation.

    Attributes:
        config: The configuration the search ran with
        matches: Matched entries in collector arrival order
        elapsed_ms: Wall-clock duration of the search in milliseconds
        chunk_count: Number of chunks (and workers) the root listing was split into
        entries_scanned: Total entries tested against the query
        directories_traversed: Directories listed by the workers
        errors: Number of listing or emission failures
        warnings: Messages for every non-fatal failure
        cancelled: Whether the search was stopped before completion
    """

    config: SearchConfig = Field(..., description="The configuration the search ran with")
    matches: List[Entry] = Field(default_factory=list, description="Matched entries in arrival order")
    elapsed_ms: int = Field(0, ge=0, description="Elapsed wall-clock time in milliseconds")
    chunk_count: int = Field(0, ge=0, description="Number of top-level chunks")
    entries_scanned: int = Field(0, ge=0, description="Entries tested against the query")
    directories_traversed: int = Field(0, ge=0, description="Directories listed during traversal")
    errors: int = Field(0, ge=0, description="Non-fatal failures encountered")
    warnings: List[str] = Field(default_factory=list, description="Warning messages")
    cancelled: bool = Field(False, description="Whether the search was cancelled")

    def get_match_count(self) -> int:
        """Get the total number of matches."""
        return len(self.matches)

    def get_paths(self) -> List[str]:
        """Get the matched paths in arrival order."""
        return [entry.path for entry in self.matches]

    def has_warnings(self) -> bool:
        """Check if any non-fatal failure was reported."""
        return len(self.warnings) > 0

    def summary(self) -> str:
        """Get the one-line summary printed after a search."""
        return f"-> Found {self.get_match_count()} results in {self.elapsed_ms} ms"

    def to_dict(self) -> Dict[str, Any]:
        """Convert search results to dictionary representation."""
        data = self.model_dump()
        data['config'] = self.config.to_dict()
        data['matches'] = [entry.to_record() for entry in self.matches]
        data['match_count'] = self.get_match_count()
        data['has_warnings'] = self.has_warnings()
        return data

    def __str__(self) -> str:
        parts = [f"Found {self.get_match_count()} matches"]
        parts.append(f"Scanned {self.entries_scanned} entries")
        parts.append(f"Took {self.elapsed_ms} ms")

        if self.has_warnings():
            parts.append(f"Warnings: {len(self.warnings)}")

        if self.cancelled:
            parts.append("Cancelled")

        return " | ".join(parts)
