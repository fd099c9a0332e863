"""update_ratings
Refresh the ``imdbRating`` of every catalog movie that links to IMDb and
rewrite the catalog file.

    beck-update-ratings [--catalog PATH] [--delay S] [--timeout S]

Movies are fetched one at a time. A failed fetch only costs that movie its
update; a catalog that can't be parsed stops the run before anything is
fetched or written.
"""

from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from beckNight.settings import CATALOG_PATH, FETCH_DELAY, FETCH_TIMEOUT
from beckNight.utils import log_debug
from beckNight.catalog import CatalogError, load_catalog, save_catalog
from beckNight.movie_api.scrapers import IMDbScraper


@dataclass(slots=True)
class UpdateReport:
    updated: int = 0
    not_found: int = 0
    failed: int = 0
    skipped: int = 0

    def __str__(self) -> str:
        return (
            f"{self.updated} updated, {self.not_found} not found, "
            f"{self.failed} failed, {self.skipped} skipped"
        )


def _say(message: str) -> None:
    print(message)
    log_debug(message)


def update_ratings(
    catalog_path: Path = CATALOG_PATH,
    scraper: Optional[IMDbScraper] = None,
) -> UpdateReport:
    """
    Fetch fresh ratings for *catalog_path* and write it back.

    Raises
    ------
    OSError, CatalogParseError
        When the catalog can't be read; the file is left untouched.
    """
    catalog_path = Path(catalog_path)
    catalog = load_catalog(catalog_path)
    scraper = scraper or IMDbScraper()
    report  = UpdateReport()

    for movie in catalog:
        if not movie.imdb_url:
            _say(f"No imdbUrl for: {movie.title}")
            report.skipped += 1
            continue

        _say(f"Fetching IMDB rating for: {movie.title}")
        try:
            rating = scraper.fetch_rating(movie.imdb_url)
        except Exception as exc:
            _say(f"  -> Error fetching: {exc}")
            report.failed += 1
            continue

        if rating:
            movie.imdb_rating = rating
            report.updated += 1
            _say(f"  -> Rating: {rating}")
        else:
            report.not_found += 1
            _say("  -> Rating not found")

    save_catalog(catalog, catalog_path)
    _say(f"{catalog_path.name} updated with latest IMDB ratings.")
    log_debug(f"Rating update complete ({report}).")
    return report


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Refresh IMDb ratings in the Beck movie catalog")
    parser.add_argument("--catalog", type=Path, default=CATALOG_PATH, help="Catalog file to update")
    parser.add_argument("--delay", type=float, default=FETCH_DELAY, help="Seconds between requests")
    parser.add_argument("--timeout", type=float, default=FETCH_TIMEOUT, help="Per-request timeout")
    args = parser.parse_args(argv)

    scraper = IMDbScraper(min_delay=args.delay, timeout=args.timeout)
    try:
        update_ratings(args.catalog, scraper)
    except (OSError, CatalogError) as exc:
        print(f"Failed to update {args.catalog.name}: {exc}", file=sys.stderr)
        log_debug(f"Failed to update {args.catalog}: {exc}")
        return 1
    return 0


# Python entry-point guard
if __name__ == "__main__":
    sys.exit(main())
