"""Shared plumbing for page scrapers."""

import logging

from rich.console import Console

from salesianos.config import ScraperConfig
from salesianos.core.extraction import RecordExtractor
from salesianos.core.fetcher import PageFetcher
from salesianos.storage import DebugManager, OutputStorage


class PageScraper:
    """Base class wiring a fetcher, an extractor and storage together.

    Subclasses declare their field lists in salesianos.scrapers.selectors and
    hand the parsed page to the extractor bucket by bucket.

    Attributes:
        config: Scraper configuration
        console: Rich console instance for formatted output
        fetcher: Fetcher used to download pages
        extractor: Selector-fallback record extractor
        storage: JSON snapshot writer
        debug: Raw HTML snapshot writer

    """

    def __init__(
        self,
        config: ScraperConfig,
        fetcher: PageFetcher | None = None,
        storage: OutputStorage | None = None,
        extractor: RecordExtractor | None = None,
        console: Console | None = None,
    ):
        """Initialize the scraper.

        Args:
            config: Scraper configuration
            fetcher: Page fetcher. Defaults to a PageFetcher built from config.
            storage: Snapshot storage. Defaults to OutputStorage on config.output_dir.
            extractor: Record extractor. Defaults to one using config's search limits.
            console: Rich console instance for formatted output. Defaults to None (creates new Console).

        """
        self.config = config
        self.console = console or Console()
        self.fetcher = fetcher or PageFetcher(config, console=self.console)
        self.storage = storage or OutputStorage(config.output_dir, console=self.console)
        self.extractor = extractor or RecordExtractor(
            max_sibling_distance=config.max_sibling_distance,
            max_ancestor_depth=config.max_ancestor_depth,
        )
        self.debug = DebugManager(config.debug_dir, console=self.console, enabled=config.save_debug_html)
        self.logger = logging.getLogger(self.__class__.__module__)
