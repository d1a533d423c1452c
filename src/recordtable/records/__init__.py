# recordtable/src/recordtable/records/__init__.py
"""
Record introspection and loading.
"""

from .introspect import (
    HEADER_TAG,
    NOT_SUPPORTED,
    TableRecord,
    header,
    get_header_tag,
    stringify_value,
    table_row,
)
from .loader import load_records, records_from_data, field_names

__all__ = [
    'HEADER_TAG',
    'NOT_SUPPORTED',
    'TableRecord',
    'header',
    'get_header_tag',
    'stringify_value',
    'table_row',
    'load_records',
    'records_from_data',
    'field_names',
]
