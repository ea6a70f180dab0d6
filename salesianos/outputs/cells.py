"""Cell formatting shared by the CSV and HTML renderers."""

import json
from collections.abc import Mapping, Sequence
from typing import Any


def format_cell(value: Any) -> str:
    """Render a record value as plain text.

    Args:
        value: Scalar, list, or mapping taken from a record

    Returns:
        '' for None, the text of tagged cells ({'text': ...}), lists joined
        with ', ', other mappings as JSON, everything else via str().

    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        if 'text' in value:
            return format_cell(value['text'])
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Sequence):
        return ', '.join(format_cell(item) for item in value)
    return str(value)


def infer_headers(rows: Sequence[Any]) -> list[str] | None:
    """Headers taken from the keys of the first row, when it is a mapping."""
    if rows and isinstance(rows[0], Mapping):
        return list(rows[0].keys())
    return None


def row_values(row: Any, headers: Sequence[str] | None) -> list[Any]:
    """Values of a row, positional for sequences and keyed by headers for mappings."""
    if isinstance(row, Mapping):
        return [row.get(key) for key in headers or row.keys()]
    if isinstance(row, Sequence) and not isinstance(row, str):
        return list(row)
    return [row]


def collect_keys(rows: Sequence[Any]) -> list[str]:
    """Union of mapping keys across rows, in first-seen order.

    Normalized records omit empty fields, so the first row alone may not
    carry every column.
    """
    keys: dict[str, None] = {}
    for row in rows:
        if isinstance(row, Mapping):
            keys.update(dict.fromkeys(row))
    return list(keys)
