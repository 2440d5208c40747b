"""
pathfinder - Core Package

A parallel search that streams every path under a directory tree containing
a given substring.
"""

__version__ = "0.1.0"
__author__ = "pathfinder Team"
