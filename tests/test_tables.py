#!/usr/bin/env python3
"""
Tests for text table and CSV generation.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import io
import logging
from dataclasses import dataclass

import pytest

from recordtable import generate_csv, generate_table
from recordtable.core.config import TableConfig
from recordtable.core.exceptions import InvalidFieldError, OutputWriteError
from recordtable.output.formatters import CSVFormatter, TableFormatter
from recordtable.output.tables import collect_rows
from recordtable.records.introspect import TableRecord, header


@dataclass
class Person(TableRecord):
    name: str = header("Name")
    age: int = header("Age", default=0)


@dataclass
class Member(TableRecord):
    name: str = header("Full Name")
    age: int = header("Years", default=0)


@dataclass
class Guarded:
    name: str

    def get_header(self, field_name):
        raise InvalidFieldError(field_name, 'Guarded')


PEOPLE = [Person("Alice", 30), Person("Bob", 5)]


class BrokenStream(io.StringIO):
    """Accepts a number of writes, then fails like a closed pipe."""

    def __init__(self, allowed_writes: int):
        super().__init__()
        self.allowed_writes = allowed_writes
        self.flushed = False

    def write(self, text):
        if self.allowed_writes <= 0:
            raise BrokenPipeError(32, "Broken pipe")
        self.allowed_writes -= 1
        return super().write(text)

    def flush(self):
        self.flushed = True
        super().flush()


class TestGenerateTable:
    """Aligned text output."""

    def test_basic_table(self, capsys):
        generate_table(PEOPLE, ["name", "age"])
        out = capsys.readouterr().out
        assert out == (
            "Name  | Age\n"
            "===========\n"
            "Alice | 30 \n"
            "Bob   | 5  \n"
        )

    def test_every_cell_padded_to_column_width(self, capsys):
        records = [Person("Al", 123456), Person("Christopher", 1)]
        generate_table(records, ["name", "age"])
        lines = capsys.readouterr().out.splitlines()
        widths = [11, 6]
        for line in [lines[0]] + lines[2:]:
            cells = line.split(" | ")
            assert [len(c) for c in cells] == widths

    def test_underline_matches_header_length(self, capsys):
        generate_table(PEOPLE, ["age", "name"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Age | Name "
        assert lines[1] == "=" * len(lines[0])

    def test_field_selection_order_and_subset(self, capsys):
        generate_table(PEOPLE, ["age"])
        assert capsys.readouterr().out == "Age\n===\n30 \n5  \n"

    def test_unknown_field_renders_empty_column(self, capsys):
        generate_table(PEOPLE, ["nope", "name"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == " | Name "
        assert lines[2] == " | Alice"

    def test_strict_rejects_unknown_field(self, capsys):
        with pytest.raises(InvalidFieldError):
            generate_table(PEOPLE, ["name", "nope"], strict=True)
        assert capsys.readouterr().out == ""

    def test_introspection_error_prints_nothing(self, capsys):
        with pytest.raises(InvalidFieldError):
            generate_table(PEOPLE + [Guarded("x")], ["name"])
        assert capsys.readouterr().out == ""

    def test_last_record_headers_win(self, capsys, caplog):
        with caplog.at_level(logging.WARNING, logger="recordtable"):
            generate_table([Person("Alice", 30), Member("Bob", 5)], ["name", "age"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Full Name | Years"
        assert "differ from the previous record" in caplog.text

    def test_custom_separator_and_underline(self, capsys):
        config = TableConfig(column_separator="  ", underline_char="-")
        generate_table(PEOPLE, ["name", "age"], config=config)
        assert capsys.readouterr().out == (
            "Name   Age\n"
            "----------\n"
            "Alice  30 \n"
            "Bob    5  \n"
        )

    def test_explicit_stream(self, capsys):
        stream = io.StringIO()
        generate_table(PEOPLE, ["name"], stream=stream)
        assert stream.getvalue() == "Name \n=====\nAlice\nBob  \n"
        assert capsys.readouterr().out == ""


class TestGenerateCSV:
    """CSV output."""

    def test_basic_csv(self, capsys):
        generate_csv(PEOPLE, ["name", "age"])
        assert capsys.readouterr().out == "Alice,30\nBob,5\n"

    def test_quoting(self):
        stream = io.StringIO()
        records = [Person('a,b', 1), Person('say "hi"', 2), Person("x\ny", 3)]
        generate_csv(records, ["name", "age"], stream=stream)
        assert stream.getvalue() == '"a,b",1\n"say ""hi""",2\n"x\ny",3\n'

    def test_custom_delimiter(self):
        stream = io.StringIO()
        config = TableConfig(csv_delimiter=";")
        generate_csv(PEOPLE, ["age", "name"], config=config, stream=stream)
        assert stream.getvalue() == "30;Alice\n5;Bob\n"

    def test_same_values_as_table(self, capsys):
        records = [Person("Alice", 30), Person("Bob", -5)]
        generate_table(records, ["name", "age"])
        table_lines = capsys.readouterr().out.splitlines()[2:]
        generate_csv(records, ["name", "age"])
        csv_lines = capsys.readouterr().out.splitlines()
        for table_line, csv_line in zip(table_lines, csv_lines):
            assert [c.rstrip() for c in table_line.split(" | ")] == csv_line.split(",")

    def test_introspection_error_prints_nothing(self, capsys):
        with pytest.raises(InvalidFieldError):
            generate_csv([Guarded("x")], ["name"])
        assert capsys.readouterr().out == ""

    def test_write_failure_keeps_partial_output_and_flushes(self):
        stream = BrokenStream(allowed_writes=1)
        with pytest.raises(OutputWriteError) as exc_info:
            generate_csv(PEOPLE, ["name", "age"], stream=stream)
        assert exc_info.value.format_name == "csv"
        assert stream.getvalue() == "Alice,30\n"
        assert stream.flushed

    def test_flushes_on_success(self):
        stream = BrokenStream(allowed_writes=10)
        generate_csv(PEOPLE, ["name"], stream=stream)
        assert stream.flushed
        assert stream.getvalue() == "Alice\nBob\n"


class TestFormatters:
    """Renderer building blocks."""

    def test_collect_rows(self):
        rows, headers = collect_rows(PEOPLE)
        assert rows == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "5"}]
        assert headers == {"name": "Name", "age": "Age"}

    def test_collect_rows_empty(self):
        assert collect_rows([]) == ([], {})

    def test_column_widths(self):
        rows = [{"a": "xxxxx", "b": "1"}]
        widths = TableFormatter().column_widths(rows, {"a": "A", "b": "Bee"}, ["a", "b"])
        assert widths == [5, 3]

    def test_format_returns_text(self):
        text = TableFormatter().format([{"a": "1"}], {"a": "Col"}, ["a"])
        assert text == "Col\n===\n1  \n"

    def test_csv_missing_field_is_empty(self):
        stream = io.StringIO()
        CSVFormatter(stream=stream).render([{"a": "1"}], ["a", "b"])
        assert stream.getvalue() == "1,\n"
