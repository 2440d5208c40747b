"""
Configuration management package for pathfinder.

This package resolves command-line options and the optional YAML defaults file
into the immutable search configuration.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config'
]
