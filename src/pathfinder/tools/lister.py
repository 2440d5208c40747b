"""
Directory lister for pathfinder.

Reads the immediate children of one directory and classifies each one as a
file or a directory. Nothing is cached between calls.
"""

import os
import logging
from typing import List

from ..models.entry import Entry, EntryKind


logger = logging.getLogger(__name__)


class RootError(Exception):
    """Raised when the search root cannot be used as a traversal starting point."""
    pass


def list_directory(path: str) -> List[Entry]:
    """
    List the immediate children of a directory.

    Symbolic links are classified without being followed, so a link to a
    directory is reported as a file and never descended into. Names are kept
    exactly as the OS returns them, including undecodable bytes carried as
    surrogate escapes, so entries are constructed without re-validation.

    Args:
        path: Absolute path of the directory to list

    Returns:
        Entries for every child, sorted by name

    Raises:
        OSError: If the directory cannot be read
    """
    parent = os.path.abspath(path)
    entries = []
    with os.scandir(parent) as it:
        for child in it:
            kind = EntryKind.DIRECTORY if child.is_dir(follow_symlinks=False) else EntryKind.FILE
            entries.append(Entry.model_construct(
                name=child.name,
                path=os.path.join(parent, child.name),
                kind=kind
            ))

    entries.sort(key=lambda entry: entry.name)
    return entries


def list_root(root: str) -> List[Entry]:
    """
    List the search root, checking that it is a usable directory.

    Args:
        root: Absolute path of the search root

    Returns:
        Entries for every child of the root

    Raises:
        RootError: If the root is a file or cannot be listed
    """
    if os.path.isfile(root):
        raise RootError("Root is a file, not a directory")

    try:
        entries = list_directory(root)
    except (OSError, ValueError) as e:
        raise RootError(f"Error getting paths: {e}") from e

    logger.debug(f"Listed {len(entries)} entries under root {root}")
    return entries
