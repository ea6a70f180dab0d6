"""Request headers sent to the event site."""

from salesianos.config import ScraperConfig


def build_headers(config: ScraperConfig) -> dict[str, str]:
    """Build the fixed header set for every request.

    Args:
        config: Scraper configuration carrying the header values

    Returns:
        The headers to attach to a GET request

    """
    return {
        'User-Agent': config.user_agent,
        'Accept': config.accept,
        'Accept-Language': config.accept_language,
    }
