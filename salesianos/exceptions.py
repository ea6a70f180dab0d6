"""Custom exceptions for the Salesianos scraper."""


class SalesianosError(Exception):
    """Base class for all scraper exceptions."""

    pass


class FetchError(SalesianosError):
    """Raised when a page could not be fetched after exhausting retries."""

    def __init__(self, url: str, last_error: BaseException | str | None, attempts: int = 0):
        """Initialize fetch error.

        Args:
            url: URL that could not be fetched
            last_error: Error raised by the final attempt
            attempts: Number of attempts made before giving up

        """
        self.url = url
        self.last_error = last_error
        self.attempts = attempts
        super().__init__(f'Failed to fetch {url} after {attempts} attempts: {last_error}')


class StorageError(SalesianosError):
    """Raised when an output directory or required file cannot be prepared."""

    def __init__(self, path: str, reason: str):
        """Initialize storage error.

        Args:
            path: Filesystem path that failed
            reason: Why the operation failed

        """
        self.path = path
        self.reason = reason
        super().__init__(f'Storage failure at {path}: {reason}')


class ReportError(SalesianosError):
    """Raised when reports cannot be generated from the aggregate data."""

    pass
