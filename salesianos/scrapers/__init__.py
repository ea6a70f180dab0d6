"""Page scrapers for the event site."""

from salesianos.scrapers.main_page import MAIN_PAGE_FILENAME, MainPageScraper
from salesianos.scrapers.sport_page import BUCKETS, SportPageScraper

__all__ = ['BUCKETS', 'MAIN_PAGE_FILENAME', 'MainPageScraper', 'SportPageScraper']
