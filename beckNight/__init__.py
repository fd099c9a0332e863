"""
beckNight
~~~~~~~~~

Top-level package for the Beck movie picker.

Exports:
  - CATALOG_PATH
  - Catalog helpers: MovieRecord, Catalog, load_catalog, save_catalog
  - Rating scraper: extract_rating, IMDbScraper (the updater itself is
    `beckNight.update_ratings`)
  - Utility functions: log_debug
"""

# settings
from beckNight.settings import CATALOG_PATH

# utils
from beckNight.utils import log_debug

# catalog
from beckNight.catalog import MovieRecord, Catalog, load_catalog, save_catalog

# rating scraper
from beckNight.movie_api.scrapers import IMDbScraper, extract_rating

__all__ = [
    # settings
    "CATALOG_PATH",
    # utils
    "log_debug",
    # catalog
    "MovieRecord",
    "Catalog",
    "load_catalog",
    "save_catalog",
    # rating scraper
    "IMDbScraper",
    "extract_rating",
]
