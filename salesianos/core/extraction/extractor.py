"""Extracts normalized records from HTML using ordered fallback selectors."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from salesianos.core.extraction.query import DocumentQuery, SoupQuery
from salesianos.models.fields import FieldSpec, RecordRule

Record = dict[str, Any]

HEADING_SELECTOR = 'h2, h3, h4'
CAPTION_SELECTORS = ('caption', '.table-title')
CATEGORY_SIBLING_SELECTOR = '.category, .group, .division'
CATEGORY_BLOCK_SELECTOR = '.category-container, .group-container'
CATEGORY_HEADING_SELECTORS = ('h3', 'h4', '.title', '.category-title')
WINNER_FIELD = FieldSpec(name='isWinner', kind='winner')


def is_empty(value: Any) -> bool:
    """Check whether a value should be left out of a record.

    Booleans are never empty; None, blank strings and empty containers are.
    """
    if isinstance(value, bool):
        return False
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | dict):
        return len(value) == 0
    return False


def build_record(pairs: Iterable[tuple[str, Any]]) -> Record:
    """Build a record holding only the non-empty values of pairs."""
    record: Record = {}
    for name, value in pairs:
        if not is_empty(value):
            record[name] = value
    return record


class RecordExtractor:
    """Turns parsed HTML regions into records described by FieldSpec lists.

    Missing data never raises: an unmatched field resolves to its default,
    and a candidate record without identity is dropped.

    Attributes:
        query: DOM query implementation the extraction runs on
        max_sibling_distance: Preceding siblings inspected for a table heading
        max_ancestor_depth: Ancestors climbed when looking for a category block

    """

    def __init__(
        self,
        query: DocumentQuery | None = None,
        max_sibling_distance: int = 3,
        max_ancestor_depth: int = 5,
    ):
        """Initialize the extractor.

        Args:
            query: DOM query implementation. Defaults to SoupQuery (BeautifulSoup + lxml).
            max_sibling_distance: Preceding siblings inspected for a table heading. Defaults to 3.
            max_ancestor_depth: Ancestors climbed for a category block. Defaults to 5.

        """
        self.query = query or SoupQuery()
        self.max_sibling_distance = max_sibling_distance
        self.max_ancestor_depth = max_ancestor_depth
        self.logger = logging.getLogger(__name__)

    def parse(self, html: str | bytes) -> Any:
        """Parse a page and return its root scope."""
        return self.query.parse(html)

    # ------------------------------------------------------------------
    # Fields and records
    # ------------------------------------------------------------------

    def extract_value(self, scope: Any, field: FieldSpec) -> Any:
        """Extract one field from scope.

        Args:
            scope: Element the selectors are evaluated against
            field: Field description

        Returns:
            The normalized value, or the field default on a soft miss.

        """
        q = self.query

        if field.kind == 'texts':
            for selector in field.selectors:
                found = q.select_all(scope, selector)
                if found:
                    return [text for text in (q.text(el) for el in found) if text]
            return []

        element = q.select_first(scope, field.selectors) if field.selectors else scope

        if field.kind == 'winner':
            if element is None:
                return False
            return q.has_class(element, 'winner') or q.attr(element, 'data-winner') == 'true'

        if field.kind == 'has_class':
            if element is None or not field.attr:
                return False
            parent = q.parent(element)
            return q.has_class(element, field.attr) or (parent is not None and q.has_class(parent, field.attr))

        if element is None:
            return field.default

        if field.kind == 'attribute':
            return q.attr(element, field.attr or '').strip() or field.default
        if field.kind == 'image':
            image = element if q.matches(element, 'img') else q.select_first(element, ['img'])
            return q.attr(image, 'src').strip() if image is not None else field.default
        if field.kind == 'html':
            return q.inner_html(element) or field.default
        return q.text(element) or field.default

    def extract_record(self, scope: Any, fields: Sequence[FieldSpec], rule: RecordRule | None = None) -> Record | None:
        """Extract a record from scope, or None when the rule rejects it.

        Empty values are never inserted, so the result has no blank keys.
        """
        record = build_record((field.name, self.extract_value(scope, field)) for field in fields)
        if rule is not None and not rule.accepts(record):
            return None
        return record

    def extract_items(
        self,
        scope: Any,
        item_selector: str,
        fields: Sequence[FieldSpec],
        rule: RecordRule | None = None,
        skip: int = 0,
    ) -> list[Record]:
        """Extract a record per element matching item_selector under scope.

        Args:
            scope: Element containing the items
            item_selector: Selector enumerating candidate items
            fields: Fields extracted from each item
            rule: Acceptance rule; rejected items are discarded as noise
            skip: Number of leading items to ignore (e.g. a header row)

        Returns:
            Accepted records, in document order.

        """
        records = []
        for item in self.query.select_all(scope, item_selector)[skip:]:
            record = self.extract_record(item, fields, rule)
            if record is not None:
                records.append(record)
        return records

    def extract_collection(
        self,
        scope: Any,
        container_selector: str,
        item_selector: str,
        fields: Sequence[FieldSpec],
        rule: RecordRule | None = None,
    ) -> list[Record]:
        """Extract records from every item of every matching container."""
        records = []
        for container in self.query.select_all(scope, container_selector):
            records.extend(self.extract_items(container, item_selector, fields, rule))
        return records

    def select_outermost(self, scope: Any, selector: str) -> list[Any]:
        """Select elements matching selector, skipping those nested in an earlier match."""
        chosen: list[Any] = []
        for element in self.query.select_all(scope, selector):
            if not any(self._is_ancestor(outer, element) for outer in chosen):
                chosen.append(element)
        return chosen

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def extract_cell(self, cell: Any) -> str | Record:
        """Extract a table cell as text, or as a tagged mapping for winner/image cells."""
        q = self.query
        text = q.text(cell)
        if self.extract_value(cell, WINNER_FIELD):
            return {'text': text, 'isWinner': True}
        image = q.select_first(cell, ['img'])
        if image is not None:
            return build_record([('text', text), ('imgSrc', q.attr(image, 'src'))]) or {'text': text}
        return text

    def extract_rows(self, table: Any) -> list[list[str | Record]]:
        """Extract every non-empty row of a table as a list of cells."""
        rows = []
        for row in self.query.select_all(table, 'tr'):
            cells = [self.extract_cell(cell) for cell in self.query.select_all(row, 'th, td')]
            if cells:
                rows.append(cells)
        return rows

    def extract_table(
        self,
        table: Any,
        index: int | None = None,
        default_label: str = 'Table',
        with_category: bool = True,
    ) -> Record | None:
        """Extract a table block as {title, category, headers, rows}.

        The first row provides the headers; the remaining rows are data.

        Args:
            table: Table element, or a block element containing one
            index: 1-based position used for the synthesized title
            default_label: Label for the synthesized title
            with_category: Whether to look up and prefix the category block

        Returns:
            The table record, or None when the table has no rows.

        """
        rows = self.extract_rows(table)
        if not rows:
            return None

        header, data = rows[0], rows[1:]
        headers = [cell['text'] if isinstance(cell, dict) else cell for cell in header]

        title = self.find_caption(table, index, default_label)
        category = self.find_category(table) if with_category else ''
        if category and category not in title:
            title = f'{category} - {title}'

        return build_record(
            [
                ('title', title),
                ('category', category),
                ('headers', headers),
                ('rows', data),
            ]
        )

    # ------------------------------------------------------------------
    # Titles and categories
    # ------------------------------------------------------------------

    def previous_heading(self, element: Any, selector: str = HEADING_SELECTOR) -> str:
        """Text of the nearest preceding sibling heading.

        The search stops after max_sibling_distance siblings, or at a sibling
        holding another table.
        """
        q = self.query
        for distance, sibling in enumerate(q.previous_siblings(element), 1):
            if distance > self.max_sibling_distance:
                break
            if q.matches(sibling, selector):
                return q.text(sibling)
            if q.matches(sibling, 'table') or q.select_first(sibling, ['table']) is not None:
                break
        return ''

    def block_heading(
        self,
        element: Any,
        block_selector: str = CATEGORY_BLOCK_SELECTOR,
        heading_selectors: Sequence[str] = CATEGORY_HEADING_SELECTORS,
    ) -> str:
        """Heading text of the closest enclosing category block."""
        block = self.query.closest(element, block_selector, self.max_ancestor_depth)
        if block is None:
            return ''
        heading = self.query.select_first(block, heading_selectors)
        return self.query.text(heading) if heading is not None else ''

    def find_caption(
        self,
        element: Any,
        index: int | None = None,
        default_label: str = 'Table',
        caption_selectors: Sequence[str] = CAPTION_SELECTORS,
    ) -> str:
        """Recover a title for a table-like block.

        Tried in order: preceding heading sibling, nested caption, heading of
        the enclosing category block, then '<default_label> <index>'.
        """
        title = self.previous_heading(element)
        if title:
            return title

        caption = self.query.select_first(element, caption_selectors)
        if caption is not None and self.query.text(caption):
            return self.query.text(caption)

        title = self.block_heading(element)
        if title:
            return title

        return f'{default_label} {index}' if index is not None else default_label

    def find_category(self, element: Any) -> str:
        """Category of a block: a preceding category sibling, else the enclosing block's heading."""
        category = self.previous_heading(element, CATEGORY_SIBLING_SELECTOR)
        return category or self.block_heading(element)

    def _is_ancestor(self, outer: Any, element: Any) -> bool:
        node = self.query.parent(element)
        while node is not None:
            if node is outer:
                return True
            node = self.query.parent(node)
        return False
