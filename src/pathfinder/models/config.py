"""
Search configuration model for pathfinder.

The configuration is built once, before the search begins, and is shared
read-only by every worker and by the collector.
"""

import os
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchConfig(BaseModel):
    """
    Immutable configuration of a single search.

    Attributes:
        root: Absolute path of the directory to search
        query: Substring to look for in every visited path
        as_json: Whether matches are emitted as structured records
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., min_length=1, description="Absolute root directory to search")
    query: str = Field(..., min_length=1, description="Case-sensitive path substring")
    as_json: bool = Field(False, description="Emit matches as JSON records")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Normalize the root to an absolute path."""
        if not v or not v.strip():
            raise ValueError("Root directory cannot be empty")
        return os.path.abspath(v)

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject an empty query. The query is otherwise kept verbatim."""
        if not v:
            raise ValueError("Search query cannot be empty")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Create a configuration from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Query: '{self.query}'"]
        parts.append(f"Root: {self.root}")
        parts.append(f"Output: {'json' if self.as_json else 'text'}")
        return " | ".join(parts)
