"""gui.picker
Range bookkeeping and the random draw behind the picker page. No Qt in
here so the rules can be used (and tested) without a display.
"""

from __future__ import annotations
import secrets
from enum import Enum
from typing import Iterable, Literal

from beckNight.catalog.models import Catalog, MovieRecord

MSG_INVALID_RANGE = "Ogiltigt intervall. Vänligen kontrollera dina nummer."
MSG_NOT_FOUND     = "Kunde inte hitta Beck-filmen. Vänligen försök igen."
MSG_GENERIC       = "Ett fel uppstod. Vänligen försök igen."


class PickerState(Enum):
    IDLE      = "idle"
    LOADING   = "loading"
    DISPLAYED = "displayed"
    ERRORED   = "errored"


class PickerError(Exception):
    """Raised for a pick the user can retry after fixing their input."""
    message = MSG_GENERIC


class InvalidRangeError(PickerError):
    message = MSG_INVALID_RANGE


class MovieNotFoundError(PickerError):
    message = MSG_NOT_FOUND


class MoviePicker:
    """Pick one movie uniformly at random from a numbered range."""

    def __init__(self, movies: Catalog | Iterable[MovieRecord], rng=None):
        self.catalog = movies if isinstance(movies, Catalog) else Catalog(movies=list(movies))
        self._rng = rng or secrets.SystemRandom()

    @property
    def movies(self) -> list[MovieRecord]:
        return self.catalog.movies

    @property
    def size(self) -> int:
        return len(self.catalog)

    # ------------------------------------------------------------- ranges
    def clamp_range(
        self, minimum: int, maximum: int, edited: Literal["min", "max"] = "min"
    ) -> tuple[int, int]:
        """
        Pull both bounds back into ``[1, size]``; if they then cross, the
        bound the user just edited drags the other one along.
        """
        if not 1 <= minimum <= self.size:
            minimum = 1
        if not 1 <= maximum <= self.size:
            maximum = self.size
        if minimum > maximum:
            if edited == "min":
                maximum = minimum
            else:
                minimum = maximum
        return minimum, maximum

    def is_valid_range(self, minimum: int, maximum: int, all_movies: bool = False) -> bool:
        if all_movies:
            return self.size > 0
        return 1 <= minimum <= maximum <= self.size

    def effective_range(
        self, minimum: int, maximum: int, all_movies: bool = False
    ) -> tuple[int, int]:
        if not self.is_valid_range(minimum, maximum, all_movies):
            raise InvalidRangeError(f"invalid range {minimum}..{maximum} for {self.size} movies")
        if all_movies:
            return 1, self.size
        return minimum, maximum

    # --------------------------------------------------------------- draw
    def random_number(self, minimum: int, maximum: int) -> int:
        return self._rng.randint(minimum, maximum)

    def pick(self, minimum: int, maximum: int, all_movies: bool = False) -> MovieRecord:
        lo, hi = self.effective_range(minimum, maximum, all_movies)
        number = self.random_number(lo, hi)
        movie  = self.catalog.by_number(number)
        if movie is None:
            raise MovieNotFoundError(f"no movie numbered {number}")
        return movie
