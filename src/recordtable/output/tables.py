# recordtable/src/recordtable/output/tables.py
"""
Table and CSV generation from lists of records.
"""

import logging
from typing import Any, List, Optional, Sequence, TextIO, Tuple

from .formatters import CSVFormatter, TableFormatter
from ..core.config import TableConfig
from ..records.introspect import HeaderMap, Row, table_row

logger = logging.getLogger(__name__)


def collect_rows(records: Sequence[Any]) -> Tuple[List[Row], HeaderMap]:
    """
    Introspect every record.

    Records are expected to share one schema. The header map of the last
    record is returned; a mismatch with the previous record is logged.
    """
    rows: List[Row] = []
    headers: HeaderMap = {}

    for record in records:
        row, record_headers = table_row(record)
        if rows and record_headers != headers:
            logger.warning("Headers of %s differ from the previous record; using the last record's headers",
                           type(record).__name__)
        rows.append(row)
        headers = record_headers

    logger.debug("Collected %d rows", len(rows))
    return rows, headers


def _check_fields(records: Sequence[Any], fields: List[str]) -> None:
    """Resolve every selected field through the last record's headers."""
    if not records:
        return
    record = records[-1]
    for field in fields:
        record.get_header(field)


def generate_table(records: Sequence[Any],
                   fields: List[str],
                   config: Optional[TableConfig] = None,
                   stream: Optional[TextIO] = None,
                   strict: bool = False) -> None:
    """
    Print records as an aligned text table.

    Nothing is printed if any record fails introspection. With ``strict``,
    selected fields unknown to the records raise ``InvalidFieldError``
    instead of rendering as empty cells.
    """
    rows, headers = collect_rows(records)
    if strict:
        _check_fields(records, fields)

    TableFormatter(config, stream).render(rows, headers, fields)


def generate_csv(records: Sequence[Any],
                 fields: List[str],
                 config: Optional[TableConfig] = None,
                 stream: Optional[TextIO] = None,
                 strict: bool = False) -> None:
    """Print records as CSV, without a header row."""
    rows, _ = collect_rows(records)
    if strict:
        _check_fields(records, fields)

    CSVFormatter(config, stream).render(rows, fields)
