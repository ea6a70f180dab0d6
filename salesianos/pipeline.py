"""Scrape run orchestration.

Fetches the main page and every sport page strictly in order, pausing
between pages, then writes the aggregate and summary snapshots.
"""

import logging
import time
import traceback
from collections.abc import Callable
from typing import Any

import logfire
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from salesianos.config import ScraperConfig
from salesianos.core.fetcher import PageFetcher
from salesianos.models.results import RunSummary, SportSummary
from salesianos.scrapers import MainPageScraper, SportPageScraper
from salesianos.storage import ALL_DATA_FILENAME, SUMMARY_FILENAME, OutputStorage
from salesianos.utils.dates import now_iso
from salesianos.utils.files import ensure_directory


def build_summary(
    main_page: dict[str, Any] | None,
    sports_data: dict[str, dict[str, Any]],
    default_title: str,
) -> RunSummary:
    """Summarize a run: counts and flags per sport.

    Args:
        main_page: Main page record, or None if it could not be scraped
        sports_data: Sport page records keyed by sport name
        default_title: Event title used when the main page has none

    Returns:
        The run summary.

    """
    general_info = (main_page or {}).get('generalInfo') or {}
    sports = []
    for name, sport in sports_data.items():
        sport = sport or {}
        sports.append(
            SportSummary(
                name=name,
                results_count=len(sport.get('results', [])),
                matches_count=len(sport.get('matches', [])),
                has_standings=bool(sport.get('standings')),
                has_medals=bool(sport.get('medals')),
                error=(sport.get('sportInfo') or {}).get('error'),
            )
        )
    return RunSummary(
        event_title=general_info.get('title') or default_title,
        last_updated=now_iso(),
        sports=sports,
    )


class ScrapeRunner:
    """Runs a full scrape: main page, every sport, aggregate and summary.

    Attributes:
        config: Scraper configuration
        console: Rich console instance for formatted output
        storage: JSON snapshot writer
        main_scraper: Landing page scraper
        sport_scraper: Sport page scraper
        sleep: Function used for pacing between page fetches

    """

    def __init__(
        self,
        config: ScraperConfig,
        fetcher: PageFetcher | None = None,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the runner.

        Args:
            config: Scraper configuration
            fetcher: Shared page fetcher. Defaults to a PageFetcher built from config.
            console: Rich console instance for formatted output. Defaults to None (creates new Console).
            sleep: Pacing function. Defaults to time.sleep.

        """
        self.config = config
        self.console = console or Console()
        self.storage = OutputStorage(config.output_dir, console=self.console)
        fetcher = fetcher or PageFetcher(config, console=self.console)
        self.main_scraper = MainPageScraper(config, fetcher=fetcher, storage=self.storage, console=self.console)
        self.sport_scraper = SportPageScraper(config, fetcher=fetcher, storage=self.storage, console=self.console)
        self.sleep = sleep
        self.logger = logging.getLogger(__name__)

    def run(self) -> RunSummary:
        """Scrape everything and write all_data.json and summary.json.

        A sport page that fails to be fetched, parsed or saved is recorded
        with its error and does not stop the run. Any other failure is
        appended to the run log with its traceback and re-raised.

        Returns:
            The run summary.

        """
        with logfire.span('scrape_run', base_url=self.config.base_url, sports=len(self.config.sports)):
            self.console.print(Panel(f'Scraping {self.config.event_title}', style='bold blue'))
            self.console.print(f'[info]Output directory: {self.config.output_dir}[/info]')
            try:
                return self._run()
            except Exception as e:
                self.logger.exception('Fatal error in the scraping process')
                logfire.error('Scrape run failed', error=str(e))
                self.console.print(f'[danger]Fatal error in the scraping process: {e}[/danger]')
                self._log_failure(e)
                raise

    def _run(self) -> RunSummary:
        ensure_directory(self.config.output_dir)
        self.storage.append_log(f'Scraping started at: {now_iso()}\n')

        main_page = self.main_scraper.scrape()
        self._pace()

        sports_data: dict[str, dict[str, Any]] = {}
        for sport in self.config.sports:
            sports_data[sport.name] = self.sport_scraper.scrape(sport)
            self._pace()

        all_data = {
            'mainPage': main_page,
            'sports': sports_data,
            'metadata': {
                'scrapedAt': now_iso(),
                'version': self.config.version,
                'config': {
                    'baseUrl': self.config.base_url,
                    'sportsScraped': [sport.name for sport in self.config.sports],
                },
            },
        }
        self.storage.write(ALL_DATA_FILENAME, all_data)

        summary = build_summary(main_page, sports_data, self.config.event_title)
        self.storage.write(SUMMARY_FILENAME, summary.model_dump(by_alias=True, exclude_none=True))

        self.storage.append_log(
            f'Scraping completed at: {now_iso()}\n'
            f'Total sports scraped: {len(sports_data)}\n'
            f'Results saved to: {self.config.output_dir}\n\n'
        )
        self._print_summary(summary)
        return summary

    def _pace(self):
        if self.config.request_delay > 0:
            self.sleep(self.config.request_delay)

    def _log_failure(self, error: Exception):
        """Append the error and its traceback to the run log, best effort."""
        trace = ''.join(traceback.format_exception(type(error), error, error.__traceback__))
        try:
            self.storage.append_log(f'ERROR at {now_iso()}: {error}\n{trace}\n')
        except Exception as log_error:
            self.logger.error(f'Could not write run log: {log_error}')

    def _print_summary(self, summary: RunSummary):
        table = Table(title=summary.event_title)
        table.add_column('Sport', style='cyan')
        table.add_column('Results', justify='right')
        table.add_column('Matches', justify='right')
        table.add_column('Standings')
        table.add_column('Medals')
        table.add_column('Error', style='red')
        for sport in summary.sports:
            table.add_row(
                sport.name,
                str(sport.results_count),
                str(sport.matches_count),
                '✓' if sport.has_standings else '',
                '✓' if sport.has_medals else '',
                sport.error or '',
            )
        self.console.print(table)
