"""Pydantic models describing what to extract from a page region."""

from typing import Literal

from pydantic import BaseModel, Field

FieldKind = Literal['text', 'attribute', 'html', 'texts', 'image', 'winner', 'has_class']


class FieldSpec(BaseModel):
    """How to locate and normalize one named value.

    Selectors are tried in order against the current scope; the first selector
    matching at least one element wins. An empty selector list targets the
    scope element itself.

    Attributes:
        name: Key of the value in the produced record
        selectors: Ordered candidate CSS selectors
        kind: Extraction strategy applied to the matched element
        attr: Attribute name for 'attribute' fields, class name for 'has_class'
        default: Value used when no selector matches

    """

    name: str = Field(description='Record key')
    selectors: list[str] = Field(default_factory=list, description='Ordered fallback selectors')
    kind: FieldKind = Field(default='text', description='Extraction strategy')
    attr: str | None = Field(default=None, description='Attribute or class name')
    default: str = Field(default='', description='Value on soft miss')


class RecordRule(BaseModel):
    """Acceptance policy for a candidate record.

    Attributes:
        require_any: At least one of these fields must be non-empty
        require_all: All of these fields must be non-empty
        min_fields: Minimum number of non-empty fields after normalization

    """

    require_any: tuple[str, ...] = ()
    require_all: tuple[str, ...] = ()
    min_fields: int = 1

    def accepts(self, record: dict) -> bool:
        """Check whether a normalized record carries enough identity."""
        if self.require_any and not any(record.get(name) for name in self.require_any):
            return False
        if self.require_all and not all(record.get(name) for name in self.require_all):
            return False
        return len(record) >= self.min_fields


def text_field(name: str, *selectors: str, default: str = '') -> FieldSpec:
    """Shortcut for a text field with ordered fallback selectors."""
    return FieldSpec(name=name, selectors=list(selectors), kind='text', default=default)


def attr_field(name: str, attr: str, *selectors: str) -> FieldSpec:
    """Shortcut for an attribute field with ordered fallback selectors."""
    return FieldSpec(name=name, selectors=list(selectors), kind='attribute', attr=attr)
