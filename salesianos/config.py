"""Configuration for the scraper and report generator.

All settings are compiled-in defaults. A single ScraperConfig is built by the
CLI and handed to every component, so tests can swap in temporary paths and
zero delays.
"""

import re
from pathlib import Path
from urllib.parse import urljoin

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


def file_slug(name: str) -> str:
    """Turn a display name into the file stem used for its outputs.

    Args:
        name: Display name such as 'Tenis de Mesa'

    Returns:
        Lowercased name with whitespace runs replaced by underscores.

    """
    return re.sub(r'\s+', '_', name.strip().lower())


class Sport(BaseModel):
    """A sport discipline covered by the event site.

    Attributes:
        name: Display name shown on the site and in reports
        url_path: Path segment of the discipline page under the base URL

    """

    name: str = Field(description='Display name of the discipline')
    url_path: str = Field(description='URL path segment under the base URL')

    @property
    def file_slug(self) -> str:
        """File stem for this sport's JSON, HTML and CSV outputs."""
        return file_slug(self.name)

    def url(self, base_url: str) -> str:
        """Absolute URL of the discipline page."""
        base = base_url if base_url.endswith('/') else base_url + '/'
        return urljoin(base, f'{self.url_path}/')


DEFAULT_SPORTS: tuple[Sport, ...] = (
    Sport(name='Fútbol', url_path='futbol'),
    Sport(name='Atletismo', url_path='atletismo'),
    Sport(name='Baloncesto', url_path='baloncesto'),
    Sport(name='Ajedrez', url_path='ajedrez'),
    Sport(name='Voleibol', url_path='voleibol'),
    Sport(name='Tenis de Mesa', url_path='tenis-de-mesa'),
    Sport(name='Béisbol', url_path='beisbol'),
    Sport(name='Fútbol Sala', url_path='futbol-sala'),
)


class ScraperConfig(BaseModel):
    """Settings shared by the fetcher, scrapers, storage and reports.

    Attributes:
        base_url: Landing page of the event; sport pages hang below it
        output_dir: Directory receiving the JSON snapshots and run log
        reports_dir: Directory receiving the HTML and CSV reports
        request_delay: Pause between consecutive page fetches, in seconds
        max_retries: Retries after the first failed attempt of a fetch
        retry_delay: Fixed pause between fetch attempts, in seconds
        timeout: Per-attempt request timeout, in seconds
        user_agent: User-Agent header sent with every request
        accept: Accept header sent with every request
        accept_language: Accept-Language header sent with every request
        event_title: Fallback event title for summaries and reports
        version: Version string written to the aggregate metadata
        max_sibling_distance: How many preceding siblings to inspect for a table heading
        max_ancestor_depth: How many ancestors to climb when looking for a category block
        save_debug_html: Whether raw page HTML is written under output_dir/debug
        sports: Disciplines to scrape, in order

    """

    base_url: str = 'https://clasico.com.do/juegos-nacionales-salesianos-2025/'
    output_dir: Path = Path('resultados_salesianos_2025')
    reports_dir: Path = Path('reportes_salesianos')
    request_delay: float = Field(default=1.5, ge=0)
    max_retries: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=2.0, ge=0)
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8'
    accept_language: str = 'es-ES,es;q=0.9,en-US;q=0.8,en;q=0.7'
    event_title: str = 'Juegos Nacionales Salesianos 2025'
    version: str = '1.0.0'
    max_sibling_distance: int = Field(default=3, ge=1)
    max_ancestor_depth: int = Field(default=5, ge=1)
    save_debug_html: bool = True
    sports: list[Sport] = Field(default_factory=lambda: list(DEFAULT_SPORTS))

    @property
    def debug_dir(self) -> Path:
        """Directory for raw HTML snapshots."""
        return self.output_dir / 'debug'

    @property
    def logs_dir(self) -> Path:
        """Directory for detailed run logs."""
        return self.output_dir / 'logs'

    @property
    def run_log_path(self) -> Path:
        """Append-only plain-text run log."""
        return self.output_dir / 'scraping_log.txt'

    def sport_url(self, sport: Sport) -> str:
        """Absolute URL of a sport's page under the configured base URL."""
        return sport.url(self.base_url)
