"""Scraper for the event's landing page."""

from typing import Any

import logfire

from salesianos.config import Sport
from salesianos.core.extraction import Record, build_record
from salesianos.exceptions import FetchError
from salesianos.scrapers import selectors as sel
from salesianos.scrapers.base import PageScraper
from salesianos.utils.dates import now_iso

MAIN_PAGE_FILENAME = 'main_page.json'


class MainPageScraper(PageScraper):
    """Extracts announcements, news, schedule, navigation and standings from the landing page."""

    def scrape(self) -> dict[str, Any] | None:
        """Fetch, parse and save the landing page.

        Returns:
            The main page record, or None if the page could not be fetched.

        """
        url = self.config.base_url
        with logfire.span('scrape_main_page', url=url):
            self.console.print(f'[step]Scraping main page: {url}[/step]')
            try:
                result = self.fetcher.fetch(url)
            except FetchError as e:
                self.logger.error(f'Error scraping main page: {e}')
                self.console.print(f'[danger]Error scraping main page: {e.last_error}[/danger]')
                return None

            self.debug.save_debug_html('main_page', result.html)
            data = self.parse(result.html)
            self.storage.write(MAIN_PAGE_FILENAME, data)
            counts = {key: len(value) for key, value in data.items() if isinstance(value, list)}
            logfire.info('Main page scraped', **counts)
            return data

    def parse(self, html: str) -> dict[str, Any]:
        """Build the main page record from raw HTML.

        Args:
            html: Raw landing page HTML

        Returns:
            Main page record; empty buckets are left out.

        """
        ex = self.extractor
        root = ex.parse(html)

        general_info = ex.extract_record(root, sel.GENERAL_INFO_FIELDS) or {}
        general_info['lastUpdated'] = now_iso()

        navigation = self._navigation_links(root)

        return build_record(
            [
                ('generalInfo', general_info),
                (
                    'announcements',
                    ex.extract_items(root, sel.ANNOUNCEMENT_ITEMS, sel.ANNOUNCEMENT_FIELDS, sel.ANNOUNCEMENT_RULE),
                ),
                ('news', ex.extract_items(root, sel.MAIN_NEWS_ITEMS, sel.MAIN_NEWS_FIELDS, sel.MAIN_NEWS_RULE)),
                (
                    'scheduleItems',
                    ex.extract_collection(
                        root, sel.SCHEDULE_CONTAINERS, sel.SCHEDULE_ITEMS, sel.SCHEDULE_FIELDS, sel.SCHEDULE_RULE
                    ),
                ),
                ('navigationLinks', navigation),
                ('standings', self._standings(root)),
                ('sportLinks', [link for link in navigation if link['isSport']]),
            ]
        )

    def _navigation_links(self, root: Any) -> list[Record]:
        """Navigation links, de-duplicated by URL and flagged when they point at a sport."""
        links: list[Record] = []
        seen: set[str] = set()
        items = self.extractor.extract_items(root, sel.NAVIGATION_ITEMS, sel.NAVIGATION_FIELDS, sel.NAVIGATION_RULE)
        for link in items:
            if link['url'] in seen:
                continue
            seen.add(link['url'])
            link['isSport'] = any(self._links_to_sport(link, sport) for sport in self.config.sports)
            links.append(link)
        return links

    @staticmethod
    def _links_to_sport(link: Record, sport: Sport) -> bool:
        return sport.name.lower() in link['text'].lower() or sport.url_path in link['url']

    def _standings(self, root: Any) -> list[Record]:
        standings = []
        for block in self.extractor.select_outermost(root, sel.MAIN_STANDINGS_BLOCKS):
            table = self.extractor.extract_table(block, default_label='Standings', with_category=False)
            if table is not None:
                standings.append(table)
        return standings
