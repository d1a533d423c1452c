# recordtable/src/recordtable/output/formatters.py
"""
Text table and CSV renderers for stringified rows.
"""

import csv
import sys
import logging
from typing import Dict, List, Optional, TextIO

from ..core.config import TableConfig
from ..core.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


class BaseFormatter:
    """Base class for all formatters."""

    def __init__(self, config: Optional[TableConfig] = None, stream: Optional[TextIO] = None):
        self.config = config or TableConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Output stream; standard output unless one was given."""
        return self._stream if self._stream is not None else sys.stdout

    @staticmethod
    def _select(row: Dict[str, str], fields: List[str]) -> List[str]:
        """Values of ``row`` in ``fields`` order, empty for missing fields."""
        return [row.get(field, "") for field in fields]


class TableFormatter(BaseFormatter):
    """Formats rows as an aligned text table."""

    def column_widths(self, rows: List[Dict[str, str]],
                      headers: Dict[str, str],
                      fields: List[str]) -> List[int]:
        """Width of each selected column: its longest header or cell."""
        widths = [len(headers.get(field, "")) for field in fields]
        for row in rows:
            for i, value in enumerate(self._select(row, fields)):
                widths[i] = max(widths[i], len(value))
        return widths

    def _line(self, values: List[str], widths: List[int]) -> str:
        return self.config.column_separator.join(
            value.ljust(width) for value, width in zip(values, widths)
        )

    def format(self, rows: List[Dict[str, str]],
               headers: Dict[str, str],
               fields: List[str]) -> str:
        """Format rows as a table with a header line and underline."""
        widths = self.column_widths(rows, headers, fields)

        header_line = self._line([headers.get(field, "") for field in fields], widths)
        lines = [header_line, self.config.underline_char * len(header_line)]

        for row in rows:
            lines.append(self._line(self._select(row, fields), widths))

        return "".join(line + "\n" for line in lines)

    def render(self, rows: List[Dict[str, str]],
               headers: Dict[str, str],
               fields: List[str]) -> None:
        """Write the formatted table to the output stream."""
        logger.debug("Rendering table with %d rows and %d columns", len(rows), len(fields))
        self.stream.write(self.format(rows, headers, fields))


class CSVFormatter(BaseFormatter):
    """Formats rows as CSV without a header row."""

    def render(self, rows: List[Dict[str, str]], fields: List[str]) -> None:
        """
        Write one CSV record per row to the output stream.

        The stream is flushed on every exit path. Rows written before a
        failure stay written.

        Raises:
            OutputWriteError: the stream rejected a write
        """
        logger.debug("Rendering CSV with %d rows and %d columns", len(rows), len(fields))
        stream = self.stream
        writer = csv.writer(
            stream,
            delimiter=self.config.csv_delimiter,
            quotechar=self.config.csv_quotechar,
            lineterminator=self.config.csv_lineterminator,
            quoting=csv.QUOTE_MINIMAL,
        )

        try:
            try:
                for row in rows:
                    writer.writerow(self._select(row, fields))
            finally:
                stream.flush()
        except (OSError, csv.Error) as e:
            raise OutputWriteError("csv", str(e)) from e
