# recordtable/src/recordtable/records/introspect.py
"""
Record introspection: turn a dataclass record into a row of strings.

A record is a dataclass instance that can resolve a display header for each
of its fields through ``get_header(field_name)``. The :class:`TableRecord`
mixin implements that lookup by reading the ``"header"`` key of each field's
metadata, which :func:`header` sets up:

    @dataclass
    class User(TableRecord):
        name: str = header("Name")
        age: int = header("Age", default=0)
"""

import dataclasses
from typing import Any, Dict, Tuple

from ..core.exceptions import InvalidFieldError, RecordTypeError


HEADER_TAG = "header"
NOT_SUPPORTED = "NO_SUPPORT"

Row = Dict[str, str]
HeaderMap = Dict[str, str]


def header(text: str, **kwargs) -> Any:
    """Declare a dataclass field whose column header is ``text``."""
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[HEADER_TAG] = text
    return dataclasses.field(metadata=metadata, **kwargs)


def get_header_tag(record: Any, field_name: str) -> str:
    """
    Return the header tag of ``field_name`` on a record or record type.

    Untagged fields yield an empty string.

    Raises:
        InvalidFieldError: the type has no field called ``field_name``
        RecordTypeError: ``record`` is not a dataclass
    """
    record_type = record if isinstance(record, type) else type(record)
    if not dataclasses.is_dataclass(record_type):
        raise RecordTypeError(record_type.__name__)

    for f in dataclasses.fields(record_type):
        if f.name == field_name:
            return str(f.metadata.get(HEADER_TAG, ""))

    raise InvalidFieldError(field_name, record_type.__name__)


class TableRecord:
    """Mixin giving dataclass records header lookup from field metadata."""

    def get_header(self, field_name: str) -> str:
        return get_header_tag(self, field_name)


def stringify_value(value: Any) -> str:
    """Render a primitive value as table text."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return "%d" % value
    return NOT_SUPPORTED


def table_row(record: Any) -> Tuple[Row, HeaderMap]:
    """
    Build the row and header map for a single record.

    Fields are visited in declaration order. Header resolution errors from
    ``record.get_header`` propagate unchanged and no partial row is returned.

    Returns:
        (row, headers) mapping field name to value text and to header text
    """
    if isinstance(record, type) or not dataclasses.is_dataclass(record):
        raise RecordTypeError(type(record).__name__)
    if not callable(getattr(record, 'get_header', None)):
        raise RecordTypeError(type(record).__name__)

    row: Row = {}
    headers: HeaderMap = {}

    for f in dataclasses.fields(record):
        headers[f.name] = record.get_header(f.name)
        row[f.name] = stringify_value(getattr(record, f.name))

    return row, headers
