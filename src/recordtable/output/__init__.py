# recordtable/src/recordtable/output/__init__.py
"""
Output formatting for recordtable.
"""

from .formatters import TableFormatter, CSVFormatter
from .tables import collect_rows, generate_table, generate_csv

__all__ = [
    'TableFormatter',
    'CSVFormatter',
    'collect_rows',
    'generate_table',
    'generate_csv',
]
