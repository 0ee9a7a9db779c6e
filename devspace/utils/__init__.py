"""Utilities for devspace."""

from .config_manager import ConfigManager
from .hashing import md5sum
from .log import Log
from .path_finder import PathFinder

__all__ = [
    'ConfigManager',
    'Log',
    'PathFinder',
    'md5sum',
]
