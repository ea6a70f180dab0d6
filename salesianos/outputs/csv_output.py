"""CSV output formatter for tabular records."""

import csv
import io
from collections.abc import Sequence
from typing import Any

from salesianos.outputs.cells import format_cell, infer_headers, row_values


def to_csv(rows: Sequence[Any], headers: Sequence[str] | None = None) -> str:
    """Format rows as CSV text.

    Cells are quoted only when they contain a comma, a quote or a line
    break; embedded quotes are doubled. Lines end with '\\n'.

    Args:
        rows: Sequence rows (written positionally) or mapping rows (written by header key)
        headers: Header row. Defaults to the keys of the first mapping row, if any.

    Returns:
        CSV text, or '' when there are no rows.

    """
    if not rows:
        return ''

    headers = list(headers) if headers else infer_headers(rows)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n', quoting=csv.QUOTE_MINIMAL)
    if headers:
        writer.writerow(headers)
    for row in rows:
        writer.writerow([format_cell(value) for value in row_values(row, headers)])
    return buffer.getvalue()


def save_csv(filepath: str, rows: Sequence[Any], headers: Sequence[str] | None = None):
    """Format and save rows as a CSV file, replacing any previous content.

    Args:
        filepath: Path to save the file
        rows: Rows to write
        headers: Optional header row

    """
    with open(filepath, 'w', encoding='utf-8', newline='') as f:
        f.write(to_csv(rows, headers))
