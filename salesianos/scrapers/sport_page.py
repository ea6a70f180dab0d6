"""Scraper for the per-discipline pages."""

from typing import Any

import logfire

from salesianos.config import Sport
from salesianos.core.extraction import Record, build_record
from salesianos.exceptions import FetchError
from salesianos.scrapers import selectors as sel
from salesianos.scrapers.base import PageScraper

BUCKETS = ('results', 'matches', 'standings', 'medals', 'news', 'gallery')


class SportPageScraper(PageScraper):
    """Extracts results, matches, standings, medals, news and gallery from a sport page."""

    def scrape(self, sport: Sport) -> dict[str, Any]:
        """Fetch, parse and save one sport page.

        A failure does not raise: the returned placeholder carries the error
        so the remaining sports can still be scraped.

        Args:
            sport: Discipline to scrape

        Returns:
            The sport page record, or {'sportInfo': {name, url, error}} on failure.

        """
        url = self.config.sport_url(sport)
        with logfire.span('scrape_sport', sport=sport.name, url=url):
            self.console.print(f'[step]Scraping {sport.name} page: {url}[/step]')
            try:
                result = self.fetcher.fetch(url)
                self.debug.save_debug_html(sport.name, result.html)
                data = self.parse(result.html, sport, url)
                self.storage.write(f'{sport.file_slug}.json', data)
            except FetchError as e:
                self.logger.error(f'Error scraping {sport.name} page: {e}')
                return self._failed(sport, url, str(e.last_error))
            except Exception as e:
                self.logger.exception(f'Error scraping {sport.name} page')
                return self._failed(sport, url, str(e))

            logfire.info('Sport scraped', sport=sport.name, **{b: len(data.get(b, [])) for b in BUCKETS})
            return data

    def _failed(self, sport: Sport, url: str, message: str) -> dict[str, Any]:
        self.console.print(f'[danger]Error scraping {sport.name} page: {message}[/danger]')
        return {'sportInfo': {'name': sport.name, 'url': url, 'error': message}}

    def parse(self, html: str, sport: Sport, url: str) -> dict[str, Any]:
        """Build a sport page record from raw HTML.

        Args:
            html: Raw sport page HTML
            sport: Discipline the page belongs to
            url: URL the page was fetched from

        Returns:
            Sport page record; empty buckets are left out.

        """
        root = self.extractor.parse(html)
        return build_record(
            [
                ('sportInfo', self._sport_info(root, sport, url)),
                ('results', self._results(root)),
                ('matches', self._matches(root)),
                ('standings', self._standings(root)),
                ('medals', self._medals(root)),
                ('news', self._news(root)),
                ('gallery', self._gallery(root)),
            ]
        )

    def _news(self, root: Any) -> list[Record]:
        return self.extractor.extract_items(root, sel.SPORT_NEWS_ITEMS, sel.SPORT_NEWS_FIELDS, sel.SPORT_NEWS_RULE)

    def _sport_info(self, root: Any, sport: Sport, url: str) -> Record:
        info = self.extractor.extract_record(root, sel.SPORT_INFO_FIELDS) or {}
        return build_record(
            [
                ('name', sport.name),
                ('url', url),
                ('title', info.get('title') or sport.name),
                ('description', info.get('description')),
                ('heroImage', info.get('heroImage')),
            ]
        )

    def _results(self, root: Any) -> list[Record]:
        tables = []
        for index, table in enumerate(self.extractor.select_outermost(root, sel.RESULT_TABLES), 1):
            record = self.extractor.extract_table(table, index=index, default_label='Resultados')
            if record is not None:
                tables.append(record)
        return tables

    def _matches(self, root: Any) -> list[Record]:
        ex = self.extractor
        matches = []
        for item in ex.query.select_all(root, sel.MATCH_ITEMS):
            match = ex.extract_record(item, sel.MATCH_FIELDS)
            if 'category' not in match:
                category = ex.block_heading(item, heading_selectors=('h3', '.category-title'))
                if category:
                    match['category'] = category
            if sel.MATCH_RULE.accepts(match):
                matches.append(match)
        return matches

    def _standings(self, root: Any) -> list[Record]:
        ex = self.extractor
        standings = []
        for index, block in enumerate(ex.query.select_all(root, sel.STANDINGS_BLOCKS), 1):
            teams = ex.extract_items(block, 'tr', sel.STANDINGS_ROW_FIELDS, sel.STANDINGS_ROW_RULE, skip=1)
            if not teams:
                continue
            standings.append(
                build_record(
                    [
                        ('title', ex.find_caption(block, index, 'Clasificación', sel.STANDINGS_CAPTIONS)),
                        ('category', ex.block_heading(block, heading_selectors=('h3', '.category-title'))),
                        ('teams', teams),
                    ]
                )
            )
        return standings

    def _medals(self, root: Any) -> list[Record]:
        ex = self.extractor
        medals = []
        for block in ex.query.select_all(root, sel.MEDAL_BLOCKS):
            items = ex.extract_items(block, sel.MEDAL_ITEMS, sel.MEDAL_ITEM_FIELDS, sel.MEDAL_ITEM_RULE)
            if items:
                medals.append({'title': ex.find_caption(block, default_label='Medallero'), 'items': items})
        return medals

    def _gallery(self, root: Any) -> list[Record]:
        ex = self.extractor
        q = ex.query
        images = []
        for container in q.select_all(root, sel.GALLERY_CONTAINERS):
            for img in q.select_all(container, 'img'):
                image = ex.extract_record(img, sel.GALLERY_FIELDS, sel.GALLERY_RULE)
                if image is None:
                    continue
                figure = q.closest(img, 'figure', ex.max_ancestor_depth)
                caption = q.select_first(figure, ['figcaption']) if figure is not None else None
                images.append(
                    build_record(
                        [
                            ('url', image['url']),
                            ('title', image.get('title') or q.attr(img, 'title')),
                            ('caption', q.text(caption) if caption is not None else ''),
                        ]
                    )
                )
        return images
