"""Minimal DOM query interface used by the record extractor."""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r'\s+')


def clean_text(value: str | None) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    if not value:
        return ''
    return _WHITESPACE.sub(' ', value).strip()


class DocumentQuery(ABC):
    """Operations the extractor needs from an HTML document.

    Implement this interface to run the extractor on top of another parser.
    """

    @abstractmethod
    def parse(self, html: str | bytes) -> Any:
        """Parse markup and return the document root scope."""
        pass

    @abstractmethod
    def select_all(self, scope: Any, selector: str) -> list[Any]:
        """Return every element under scope matching selector, in document order."""
        pass

    @abstractmethod
    def matches(self, element: Any, selector: str) -> bool:
        """Check whether element itself matches selector."""
        pass

    @abstractmethod
    def raw_text(self, element: Any) -> str:
        """Return the concatenated text content of element."""
        pass

    @abstractmethod
    def attr(self, element: Any, name: str) -> str:
        """Return attribute name of element, or '' when absent."""
        pass

    @abstractmethod
    def inner_html(self, element: Any) -> str:
        """Return the markup inside element."""
        pass

    @abstractmethod
    def parent(self, element: Any) -> Any | None:
        """Return the parent element, or None at the root."""
        pass

    @abstractmethod
    def previous_siblings(self, element: Any) -> Iterator[Any]:
        """Yield preceding sibling elements, nearest first."""
        pass

    def select_first(self, scope: Any, selectors: Iterable[str]) -> Any | None:
        """Return the first element of the first selector that matches anything.

        Selectors are tried whole and in order; they are never merged.
        """
        for selector in selectors:
            found = self.select_all(scope, selector)
            if found:
                return found[0]
        return None

    def text(self, element: Any) -> str:
        """Return the cleaned text content of element."""
        return clean_text(self.raw_text(element))

    def has_class(self, element: Any, class_name: str) -> bool:
        """Check whether element carries class_name."""
        return class_name in self.attr(element, 'class').split()

    def closest(self, element: Any, selector: str, max_depth: int) -> Any | None:
        """Return element or its nearest ancestor matching selector.

        At most max_depth ancestors above element are inspected.
        """
        node = element
        for _ in range(max_depth + 1):
            if node is None:
                return None
            if self.matches(node, selector):
                return node
            node = self.parent(node)
        return None


class SoupQuery(DocumentQuery):
    """DocumentQuery implementation backed by BeautifulSoup and lxml."""

    def __init__(self, parser: str = 'lxml'):
        """Initialize the query helper.

        Args:
            parser: BeautifulSoup tree builder. Defaults to 'lxml'.

        """
        self.parser = parser

    def parse(self, html: str | bytes) -> BeautifulSoup:
        """Parse markup into a BeautifulSoup document.

        Raises:
            TypeError: If html is not text or bytes.

        """
        if not isinstance(html, str | bytes):
            raise TypeError(f'Cannot parse {type(html).__name__} as markup')
        return BeautifulSoup(html, self.parser)

    def select_all(self, scope: Tag, selector: str) -> list[Tag]:
        return list(scope.select(selector))

    def matches(self, element: Tag, selector: str) -> bool:
        if isinstance(element, BeautifulSoup) or not isinstance(element, Tag):
            return False
        return bool(element.css.match(selector))

    def raw_text(self, element: Tag) -> str:
        return element.get_text()

    def attr(self, element: Tag, name: str) -> str:
        value = element.get(name)
        if value is None:
            return ''
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return ' '.join(value)
        return str(value)

    def inner_html(self, element: Tag) -> str:
        return element.decode_contents().strip()

    def parent(self, element: Tag) -> Tag | None:
        parent = element.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return parent

    def previous_siblings(self, element: Tag) -> Iterator[Tag]:
        for sibling in element.previous_siblings:
            if isinstance(sibling, Tag):
                yield sibling
