# recordtable/src/recordtable/records/loader.py
"""
Build table records from YAML documents.

Accepted layouts:

    - {name: Alice, age: 30}
    - {name: Bob, age: 5}

or

    headers: {name: Name, age: Age}
    records:
      - {name: Alice, age: 30}
"""

import keyword
import dataclasses
import logging
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .introspect import TableRecord, header
from ..core.exceptions import RecordLoadError

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset(dir(TableRecord))


def make_record_type(field_names: List[str],
                     headers: Optional[Dict[str, str]] = None,
                     type_name: str = "Record") -> type:
    """Create a dataclass record type with one header-tagged field per name."""
    headers = headers or {}
    spec = []
    for name in field_names:
        spec.append((name, Any, header(str(headers.get(name, name)), default="")))
    return dataclasses.make_dataclass(type_name, spec, bases=(TableRecord,))


def _split_document(data: Any, source: str) -> Tuple[List[Any], Dict[str, str]]:
    """Return the raw record list and header overrides of a parsed document."""
    if data is None:
        return [], {}
    if isinstance(data, list):
        return data, {}
    if isinstance(data, dict) and 'records' in data:
        headers = data.get('headers') or {}
        if not isinstance(headers, dict):
            raise RecordLoadError(source, "'headers' must be a mapping")
        records = data['records'] or []
        if not isinstance(records, list):
            raise RecordLoadError(source, "'records' must be a list")
        return records, {str(k): str(v) for k, v in headers.items()}
    raise RecordLoadError(source, "expected a list of records or a mapping with 'records'")


def records_from_data(data: Any, source: str = "<data>") -> List[Any]:
    """Turn parsed YAML data into record instances sharing a single type."""
    raw_records, headers = _split_document(data, source)

    names: List[str] = []
    for index, item in enumerate(raw_records):
        if not isinstance(item, dict):
            raise RecordLoadError(source, f"record {index} is not a mapping")
        for key in item:
            if not isinstance(key, str) or not key.isidentifier() or keyword.iskeyword(key):
                raise RecordLoadError(source, f"field name {key!r} is not a valid identifier")
            if key in RESERVED_NAMES:
                raise RecordLoadError(source, f"field name {key!r} clashes with a record attribute")
            if key not in names:
                names.append(key)

    unknown = [name for name in headers if name not in names]
    if unknown:
        logger.warning("Headers given for unknown fields: %s", ", ".join(unknown))

    record_type = make_record_type(names, headers)
    logger.debug("Loaded %d records with fields %s from %s",
                 len(raw_records), names, source)
    return [record_type(**item) for item in raw_records]


def load_records(text: str, source: str = "<stdin>") -> List[Any]:
    """Parse a YAML document and build its records."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RecordLoadError(source, f"invalid YAML syntax: {e}")
    return records_from_data(data, source)


def field_names(records: List[Any]) -> List[str]:
    """Declared field names of the first record, in order."""
    if not records:
        return []
    return [f.name for f in dataclasses.fields(records[0])]
