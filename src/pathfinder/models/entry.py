"""
Entry data models for pathfinder.

This module defines the structure used to represent a single filesystem object
discovered while listing a directory, along with its file/directory classification.
"""

import os
from enum import Enum
from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(Enum):
    """Classification of a listed filesystem object."""
    FILE = "file"
    DIRECTORY = "directory"


class Entry(BaseModel):
    """
    A single filesystem object discovered during traversal.

    Entries are created by the directory lister, once per listing, and are
    immutable afterwards. The kind is recorded at listing time and never
    re-checked against the filesystem.

    Attributes:
        name: Base name of the object
        path: Absolute path, the parent directory joined with the name
        kind: Whether the object is a file or a directory
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Base name of the filesystem object")
    path: str = Field(..., min_length=1, description="Absolute path of the filesystem object")
    kind: EntryKind = Field(..., serialization_alias="type", description="File or directory")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure the entry path is absolute."""
        if not os.path.isabs(v):
            raise ValueError(f"Entry path must be absolute: {v}")
        return v

    @field_validator('kind', mode='before')
    @classmethod
    def validate_kind(cls, v) -> EntryKind:
        """Accept the string form of the kind."""
        if isinstance(v, str):
            try:
                return EntryKind(v)
            except ValueError:
                raise ValueError(f"Invalid entry kind: {v}")
        return v

    def is_directory(self) -> bool:
        """Check if this entry is a directory."""
        return self.kind == EntryKind.DIRECTORY

    def matches(self, query: str) -> bool:
        """Check if the query is a case-sensitive substring of the entry path."""
        return query in self.path

    def to_record(self) -> Dict[str, Any]:
        """Convert the entry to its structured output record."""
        return {
            'name': self.name,
            'path': self.path,
            'type': self.kind.value
        }

    def to_json(self) -> str:
        """
        Serialize the entry as a compact JSON object.

        Returns:
            JSON text with the fields name, path and type

        Raises:
            pydantic_core.PydanticSerializationError: If the entry cannot be encoded
        """
        return self.model_dump_json(by_alias=True)

    def __str__(self) -> str:
        return f"{self.path} ({self.kind.value})"
