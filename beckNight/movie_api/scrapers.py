# beckNight/movie_api/scrapers.py
from __future__ import annotations

import re, time, random, requests
from typing import Optional

from beckNight.settings import REQUEST_HEADERS, FETCH_DELAY, FETCH_TIMEOUT

# ---------- Regex patterns (most resilient first) --------------------------
# Free-form segments are width-bounded so huge or hostile pages can't make
# the search go quadratic.
RATING_PATTERNS: tuple[re.Pattern, ...] = (
    # bare "8.5/10"
    re.compile(r"(?<!\d)(\d{1,2}\.\d)/10"),
    # any short span wrapping just the value
    re.compile(r"<span[^>]{0,200}>(\d{1,2}\.\d)</span>"),
    # legacy hero rating bar
    re.compile(
        r'<span class="sc-[a-z0-9]{1,40}-1[^"]{0,200}" '
        r'data-testid="hero-rating-bar__aggregate-rating__score">(\d{1,2}\.\d)</span>'
    ),
    # legacy microdata
    re.compile(r'<span itemprop="ratingValue">(\d{1,2}\.\d)</span>'),
    # "IMDb RATING" caption followed by the value
    re.compile(r"IMDb RATING[^0-9]{0,50}(\d{1,2}\.\d)", re.IGNORECASE),
)


def extract_rating(html: str | None) -> Optional[str]:
    """Return the first rating any pattern finds in *html*, or None."""
    if not html:
        return None
    for pattern in RATING_PATTERNS:
        m = pattern.search(html)
        if m:
            return m.group(1)
    return None


class IMDbScraper:
    """
    Fetch an IMDb title page and pull the aggregate rating out of it.

    Parameters
    ----------
    min_delay : float
        Minimum seconds between successive network requests. A 0-0.3 s
        jitter is added on top. ``0`` disables the pause.
    timeout : float
        Per-request timeout handed to requests.
    session : requests.Session, optional
        Reused for every fetch; browser-like headers are added to it.
    """

    def __init__(
        self,
        *,
        min_delay: float = FETCH_DELAY,
        timeout: float = FETCH_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.session = session or requests.Session()
        self.session.headers.update(REQUEST_HEADERS)
        self.timeout    = timeout
        self._min_delay = min_delay
        self._last_hit  = 0.0   # epoch timestamp of previous fetch

    # ------------------------------------------------------------------ public
    def fetch_rating(self, url: str) -> Optional[str]:
        """Rating string for the page at *url*, None when no pattern matched.

        Network and HTTP errors propagate as ``requests.RequestException``.
        """
        return extract_rating(self.fetch_html(url))

    # --------------------------------------------------------- network & delay
    def fetch_html(self, url: str) -> str:
        # ---- throttle --------------------------------------------------
        wait = self._min_delay - (time.time() - self._last_hit)
        if self._min_delay > 0 and wait > 0:
            time.sleep(wait + random.uniform(0.0, 0.3))
        # ---------------------------------------------------------------
        try:
            resp = self.session.get(url, timeout=self.timeout)
        finally:
            self._last_hit = time.time()
        resp.raise_for_status()
        return resp.text
