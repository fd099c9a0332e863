# MovieRecord dataclass + the Catalog that holds them
from __future__ import annotations
from dataclasses import dataclass, field

from beckNight.settings import CATALOG_NAME


@dataclass(slots=True)
class MovieRecord:
    number: int
    title: str
    year: int
    description: str | None = None
    imdb_url: str | None = None
    tv4play_url: str | None = None
    poster_url: str | None = None
    runtime: str | None = None
    imdb_rating: str | None = None

    @property
    def display_title(self) -> str:
        return f"{self.title} ({self.year})"


# catalog key  →  MovieRecord attribute, in the order the file stores them
FIELD_ORDER: tuple[tuple[str, str], ...] = (
    ("number",      "number"),
    ("title",       "title"),
    ("year",        "year"),
    ("description", "description"),
    ("imdbUrl",     "imdb_url"),
    ("tv4playUrl",  "tv4play_url"),
    ("posterUrl",   "poster_url"),
    ("runtime",     "runtime"),
    ("imdbRating",  "imdb_rating"),
)
REQUIRED_KEYS = ("number", "title", "year")
INT_KEYS      = ("number", "year")


@dataclass(slots=True)
class Catalog:
    """Ordered list of movies plus the variable name the file declares."""
    movies: list[MovieRecord] = field(default_factory=list)
    name: str = CATALOG_NAME

    def __len__(self) -> int:
        return len(self.movies)

    def __iter__(self):
        return iter(self.movies)

    def by_number(self, number: int) -> MovieRecord | None:
        return next((m for m in self.movies if m.number == number), None)
