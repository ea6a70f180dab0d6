"""Selector-fallback record extraction."""

from salesianos.core.extraction.extractor import Record, RecordExtractor, build_record, is_empty
from salesianos.core.extraction.query import DocumentQuery, SoupQuery, clean_text

__all__ = ['DocumentQuery', 'Record', 'RecordExtractor', 'SoupQuery', 'build_record', 'clean_text', 'is_empty']
