"""HTTP page fetcher with fixed headers and bounded, fixed-delay retries."""

import logging
import time

import logfire
import requests
from rich.console import Console
from tenacity import RetryError

from salesianos.config import ScraperConfig
from salesianos.exceptions import FetchError
from salesianos.models.results import FetchResult
from salesianos.utils.headers import build_headers
from salesianos.utils.retry import get_retryer


class PageFetcher:
    """Fetches pages from the event site one at a time.

    Every attempt uses the same headers and timeout. A failed attempt (network
    error, timeout or non-2xx status) is retried after a fixed delay until the
    retry budget is spent, then a FetchError is raised. Pacing between
    different pages is the caller's responsibility.

    Attributes:
        config: Scraper configuration (timeout, retries, headers)
        console: Rich console instance for formatted output
        session: Requests session used for all attempts

    """

    def __init__(
        self,
        config: ScraperConfig,
        console: Console | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the fetcher.

        Args:
            config: Scraper configuration
            console: Rich console instance for formatted output. Defaults to None (creates new Console).
            session: Preconfigured session, mainly for tests. Defaults to a new requests.Session.

        """
        self.config = config
        self.console = console or Console()
        self.session = session or requests.Session()
        self.session.headers.update(build_headers(config))
        self.logger = logging.getLogger(__name__)

    def fetch(self, url: str) -> FetchResult:
        """Fetch a page, retrying on failure.

        Args:
            url: The URL that is being fetched

        Returns:
            FetchResult with the decoded HTML.

        Raises:
            FetchError: If every attempt failed.

        """
        start_time = time.time()
        attempts = 0

        def before_sleep(retry_state):
            error = retry_state.outcome.exception()
            remaining = self.config.max_retries - retry_state.attempt_number + 1
            self.console.print(f'[warning]Retrying {url} - attempts remaining: {remaining}[/warning]')
            self.logger.warning(f'Fetch attempt {retry_state.attempt_number} failed for {url}: {error}')
            logfire.warn('Retrying fetch', url=url, attempt=retry_state.attempt_number, error=str(error))

        retryer = get_retryer(
            max_retries=self.config.max_retries,
            delay=self.config.retry_delay,
            exceptions=(requests.RequestException,),
            log_callback=before_sleep,
            reraise=False,
        )

        try:
            for attempt in retryer:
                with attempt:
                    attempts += 1
                    response = self._get(url)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            self.logger.error(f'Giving up on {url} after {attempts} attempts: {last_error}')
            logfire.error('Fetch failed', url=url, attempts=attempts, error=str(last_error))
            raise FetchError(url, last_error, attempts) from last_error

        fetch_time = time.time() - start_time
        self.logger.info(f'Fetched {url} ({response.status_code}, {len(response.text)} chars, {fetch_time:.2f}s)')
        return FetchResult(
            url=url,
            html=response.text,
            status_code=response.status_code,
            fetch_time=fetch_time,
            attempts=attempts,
        )

    def _get(self, url: str) -> requests.Response:
        """Perform a single GET attempt.

        Args:
            url: The URL that is being fetched

        Returns:
            The response, guaranteed to have a 2xx status.

        Raises:
            requests.RequestException: On network errors, timeouts and bad statuses.

        """
        response = self.session.get(url, timeout=self.config.timeout, allow_redirects=True)
        response.raise_for_status()
        return response

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self):
        """Close the underlying session."""
        self.session.close()
