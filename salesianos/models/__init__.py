"""Pydantic models for field specs and results."""

from salesianos.models.fields import FieldKind, FieldSpec, RecordRule, attr_field, text_field
from salesianos.models.results import FetchResult, RunSummary, SportSummary

__all__ = [
    'FieldKind',
    'FieldSpec',
    'RecordRule',
    'attr_field',
    'text_field',
    'FetchResult',
    'RunSummary',
    'SportSummary',
]
