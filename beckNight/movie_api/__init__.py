# movie_api/__init__.py

from .scrapers import IMDbScraper, extract_rating, RATING_PATTERNS

__all__ = [
    "IMDbScraper",
    "extract_rating",
    "RATING_PATTERNS",
]
