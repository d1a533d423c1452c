# recordtable/src/recordtable/core/__init__.py
"""
Core components: configuration, errors and the command-line application.
"""

from .config import TableConfig, load_config
from .exceptions import TableError, ConfigError

__all__ = [
    'TableConfig',
    'load_config',
    'TableError',
    'ConfigError',
]
