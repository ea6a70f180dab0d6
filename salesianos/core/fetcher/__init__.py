"""Page fetcher exports."""

from salesianos.core.fetcher.simple import PageFetcher

__all__ = ['PageFetcher']
