# recordtable/src/recordtable/__init__.py
"""
Render lists of dataclass records as aligned text tables or CSV.
"""

from .core.config import TableConfig
from .core.exceptions import (
    TableError,
    InvalidFieldError,
    RecordTypeError,
    OutputWriteError,
)
from .records import (
    HEADER_TAG,
    NOT_SUPPORTED,
    TableRecord,
    header,
    get_header_tag,
    stringify_value,
    table_row,
)
from .output import generate_table, generate_csv

__version__ = "0.1.0"

__all__ = [
    'TableConfig',
    'TableError',
    'InvalidFieldError',
    'RecordTypeError',
    'OutputWriteError',
    'HEADER_TAG',
    'NOT_SUPPORTED',
    'TableRecord',
    'header',
    'get_header_tag',
    'stringify_value',
    'table_row',
    'generate_table',
    'generate_csv',
]
