"""Utility components for the scraper."""

from salesianos.utils.dates import format_local, now_iso
from salesianos.utils.files import ensure_directory
from salesianos.utils.headers import build_headers
from salesianos.utils.logging import setup_local_logging
from salesianos.utils.retry import get_retryer

__all__ = [
    'build_headers',
    'ensure_directory',
    'format_local',
    'get_retryer',
    'now_iso',
    'setup_local_logging',
]
