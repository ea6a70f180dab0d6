"""HTML output formatter for report pages."""

import html
from collections.abc import Iterable, Sequence
from typing import Any

from salesianos.outputs.cells import format_cell, infer_headers, row_values
from salesianos.utils.dates import format_local

STYLESHEET = """
    body {
      font-family: Arial, sans-serif;
      line-height: 1.6;
      margin: 0;
      padding: 20px;
      color: #333;
    }
    h1 {
      color: #1a5276;
      margin-bottom: 20px;
      border-bottom: 2px solid #3498db;
      padding-bottom: 10px;
    }
    h2 {
      color: #2874a6;
      margin-top: 30px;
      margin-bottom: 15px;
    }
    h3 {
      color: #2e86c1;
      margin-top: 25px;
      margin-bottom: 10px;
    }
    .table-container {
      margin-bottom: 30px;
      overflow-x: auto;
    }
    table {
      border-collapse: collapse;
      width: 100%;
      margin-bottom: 10px;
    }
    th {
      background-color: #3498db;
      color: white;
      text-align: left;
    }
    tr:nth-child(even) {
      background-color: #f2f2f2;
    }
    tr:hover {
      background-color: #ddd;
    }
    td.winner {
      font-weight: bold;
    }
    .notice {
      background-color: #f8f9fa;
      border-left: 4px solid #3498db;
      padding: 10px 15px;
      margin-bottom: 20px;
    }
    .timestamp {
      text-align: center;
      font-size: 0.8em;
      color: #7f8c8d;
      margin-top: 50px;
    }
    .nav {
      display: flex;
      flex-wrap: wrap;
      gap: 10px;
      margin-bottom: 20px;
    }
    .nav a {
      padding: 8px 15px;
      background-color: #3498db;
      color: white;
      text-decoration: none;
      border-radius: 3px;
    }
    .nav a:hover {
      background-color: #2874a6;
    }
    .gallery {
      display: flex;
      flex-wrap: wrap;
      gap: 10px;
    }
    .gallery figure {
      margin: 0 0 15px;
      text-align: center;
    }
    .gallery img {
      max-width: 200px;
      max-height: 150px;
      object-fit: cover;
    }
"""


def escape(value: Any) -> str:
    """Format a value as text and escape it for HTML."""
    return html.escape(format_cell(value), quote=True)


def _cell_html(value: Any) -> str:
    if isinstance(value, dict) and value.get('isWinner'):
        return f'<td class="winner">{escape(value)}</td>'
    return f'<td>{escape(value)}</td>'


def to_html_table(rows: Sequence[Any], title: str = '', headers: Sequence[str] | None = None) -> str:
    """Format rows as an HTML table fragment.

    Every header and cell is HTML-escaped.

    Args:
        rows: Sequence rows or mapping rows
        title: Caption rendered as <h3> above the table; omitted when blank
        headers: Header row. Defaults to the keys of the first mapping row, if any.

    Returns:
        A <div class="table-container"> fragment, or a 'no data' paragraph for empty input.

    """
    if not rows:
        return f'<p>No data available for {escape(title)}</p>'

    headers = list(headers) if headers else infer_headers(rows)

    lines = ['<div class="table-container">']
    if title:
        lines.append(f'  <h3>{escape(title)}</h3>')
    lines.append('  <table border="1" cellpadding="5" cellspacing="0">')

    if headers:
        header_cells = ''.join(f'<th>{escape(header)}</th>' for header in headers)
        lines.append(f'    <thead><tr>{header_cells}</tr></thead>')

    lines.append('    <tbody>')
    for row in rows:
        cells = ''.join(_cell_html(value) for value in row_values(row, headers))
        lines.append(f'      <tr>{cells}</tr>')
    lines.append('    </tbody>')
    lines.append('  </table>')
    lines.append('</div>')
    return '\n'.join(lines)


def render_page(title: str, body_fragments: Iterable[str], generated_at: str | None = None) -> str:
    """Wrap fragments in a complete HTML document with the report stylesheet.

    Args:
        title: Page title, used for <title> and the top <h1>
        body_fragments: HTML fragments placed in order inside <body>
        generated_at: Display timestamp for the footer. Defaults to now.

    Returns:
        The full HTML document.

    """
    timestamp = generated_at or format_local()
    lines = [
        '<!DOCTYPE html>',
        '<html lang="es">',
        '<head>',
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'  <title>{html.escape(title)}</title>',
        f'  <style>{STYLESHEET}  </style>',
        '</head>',
        '<body>',
        f'  <h1>{html.escape(title)}</h1>',
    ]
    lines.extend(body_fragments)
    lines.append(f'  <div class="timestamp">Generado el: {html.escape(timestamp)}</div>')
    lines.append('</body>')
    lines.append('</html>')
    return '\n'.join(lines) + '\n'
