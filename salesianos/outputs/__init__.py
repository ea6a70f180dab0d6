"""Report renderers: CSV, HTML tables and full report pages."""

from salesianos.outputs.csv_output import save_csv, to_csv
from salesianos.outputs.html_output import render_page, to_html_table
from salesianos.outputs.report import ReportBuilder

__all__ = ['ReportBuilder', 'render_page', 'save_csv', 'to_csv', 'to_html_table']
