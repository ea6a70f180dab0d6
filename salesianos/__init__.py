"""Salesianos - results scraper for the Juegos Nacionales Salesianos 2025.

Fetch the event pages, extract records with selector fallbacks, and render
static reports.
"""

from salesianos.config import DEFAULT_SPORTS, ScraperConfig, Sport, file_slug
from salesianos.core.extraction import DocumentQuery, RecordExtractor, SoupQuery, build_record
from salesianos.core.fetcher import PageFetcher
from salesianos.exceptions import FetchError, ReportError, SalesianosError, StorageError
from salesianos.models import FetchResult, FieldSpec, RecordRule, RunSummary, SportSummary
from salesianos.outputs import ReportBuilder, render_page, to_csv, to_html_table
from salesianos.pipeline import ScrapeRunner, build_summary
from salesianos.scrapers import MainPageScraper, SportPageScraper
from salesianos.storage import DebugManager, OutputStorage

__all__ = [
    # Configuration
    'DEFAULT_SPORTS',
    'ScraperConfig',
    'Sport',
    'file_slug',
    # Core components
    'DocumentQuery',
    'PageFetcher',
    'RecordExtractor',
    'SoupQuery',
    'build_record',
    # Scrapers and orchestration
    'MainPageScraper',
    'ScrapeRunner',
    'SportPageScraper',
    'build_summary',
    # Storage and reports
    'DebugManager',
    'OutputStorage',
    'ReportBuilder',
    'render_page',
    'to_csv',
    'to_html_table',
    # Models
    'FetchResult',
    'FieldSpec',
    'RecordRule',
    'RunSummary',
    'SportSummary',
    # Exceptions
    'FetchError',
    'ReportError',
    'SalesianosError',
    'StorageError',
]
