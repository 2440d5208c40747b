"""
Data models for pathfinder.

This module contains all the core data structures used throughout the system.
"""

from .entry import Entry, EntryKind
from .config import SearchConfig
from .search_results import SearchResults

__all__ = ['Entry', 'EntryKind', 'SearchConfig', 'SearchResults']
