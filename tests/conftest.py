import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
import requests

from beckNight import utils
from beckNight.catalog.models import MovieRecord


@pytest.fixture(autouse=True)
def _debug_log(tmp_path, monkeypatch):
    """Keep log_debug output out of the package directory."""
    log_path = tmp_path / "beck_debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", log_path)
    return log_path


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class FakeSession:
    """Stands in for requests.Session; *pages* maps url → body / response / exception."""

    def __init__(self, pages: dict | None = None):
        self.pages = pages or {}
        self.headers: dict[str, str] = {}
        self.calls: list[str] = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        if isinstance(page, FakeResponse):
            return page
        return FakeResponse(page)


class FixedRng:
    """randint() always answers *value* (or raises it, if it's an exception)."""

    def __init__(self, value):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if isinstance(self.value, Exception):
            raise self.value
        return self.value


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def five_movies() -> list[MovieRecord]:
    return [
        MovieRecord(1, "Beck - Lockpojken", 1997, description="Test movie 1"),
        MovieRecord(2, "Beck - Monstret", 1998, description="Test movie 2",
                    runtime="89 min", imdb_rating="6.4",
                    tv4play_url="https://www.tv4play.se/program/beck"),
        MovieRecord(3, "Beck - Vita nätter", 1998, description="Test movie 3"),
        MovieRecord(4, "Beck - Öga för öga", 1998, description="Test movie 4"),
        MovieRecord(5, "Beck - Pojken i glaskulan", 2002, description="Test movie 5"),
    ]
