from __future__ import annotations
import html

from PySide6.QtCore    import Qt, QUrl, QPropertyAnimation, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkRequest, QNetworkReply # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect
)

from ..settings import ACCENT_COLOR
from ..utils    import open_url_host_browser, log_debug
from ..catalog.models import MovieRecord

POSTER_WIDTH = 220
WATCH_TEXT   = "Streama filmen på TV4 Play"


class MovieCard(QFrame):
    """Poster, title (year), IMDb rating / runtime, description and TV4 link."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.movie: MovieRecord | None = None
        self._poster_url: str | None = None

        self._net = QNetworkAccessManager(self)
        self._net.finished.connect(self._on_poster_loaded)

        root = QHBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(16)

        # ── poster (left) ────────────────────────────────────────────────
        self.poster_label = QLabel(alignment=Qt.AlignCenter)
        self.poster_label.setFixedWidth(POSTER_WIDTH)
        self.poster_label.setWordWrap(True)
        root.addWidget(self.poster_label, 0, Qt.AlignTop)

        # ── text column (right) ─────────────────────────────────────────
        text = QVBoxLayout()
        self.title_label = QLabel()
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-size:20px; font-weight:bold;")
        text.addWidget(self.title_label)

        # rating panel: IMDb | runtime
        self.rating_panel = QFrame()
        panel = QHBoxLayout(self.rating_panel)
        panel.setContentsMargins(0, 0, 0, 0)
        self.rating_item  = QLabel()
        self.runtime_item = QLabel()
        for item in (self.rating_item, self.runtime_item):
            item.setStyleSheet(
                f"border:1px solid {ACCENT_COLOR}; border-radius:6px; padding:2px 8px;"
            )
            panel.addWidget(item, 0, Qt.AlignLeft)
        panel.addStretch()
        text.addWidget(self.rating_panel)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        text.addWidget(self.description_label)

        self.link_label = QLabel()
        self.link_label.setTextFormat(Qt.RichText)
        self.link_label.setTextInteractionFlags(Qt.TextBrowserInteraction)
        self.link_label.setOpenExternalLinks(False)
        self.link_label.setCursor(Qt.PointingHandCursor)
        self.link_label.linkActivated.connect(open_url_host_browser)
        text.addWidget(self.link_label)
        text.addStretch()
        root.addLayout(text, 1)

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    # ------------------------------------------------------------------
    def set_movie(self, movie: MovieRecord) -> None:
        self.movie = movie
        self.title_label.setText(movie.display_title)

        # rating panel only when there's something to put in it
        self.rating_item.setText(f"IMDB: {movie.imdb_rating} ★" if movie.imdb_rating else "")
        self.rating_item.setVisible(bool(movie.imdb_rating))
        self.runtime_item.setText(f"Längd: {movie.runtime} 🕐" if movie.runtime else "")
        self.runtime_item.setVisible(bool(movie.runtime))
        self.rating_panel.setVisible(bool(movie.imdb_rating or movie.runtime))

        self.description_label.setText(movie.description or "")
        self.description_label.setVisible(bool(movie.description))

        if movie.tv4play_url:
            href = html.escape(movie.tv4play_url, quote=True)
            self.link_label.setText(f'<a href="{href}">{WATCH_TEXT}</a>')
            self.link_label.show()
        else:
            self.link_label.clear()
            self.link_label.hide()

        self.poster_label.clear()
        self.poster_label.setToolTip("")
        if movie.poster_url:
            self._load_poster(movie)
            self.poster_label.show()
        else:
            self._poster_url = None
            self.poster_label.hide()

    # ------------------------------------------------------------------
    # poster download
    def _load_poster(self, movie: MovieRecord) -> None:
        self._poster_url = movie.poster_url
        self.poster_label.setToolTip(f"Affisch för {movie.title}")
        self._net.get(QNetworkRequest(QUrl(movie.poster_url)))

    @Slot(QNetworkReply)
    def _on_poster_loaded(self, reply: QNetworkReply) -> None:
        reply.deleteLater()
        if self._poster_url is None or reply.request().url() != QUrl(self._poster_url):
            return                                  # a newer movie took over
        pix = QPixmap()
        if reply.error() == QNetworkReply.NetworkError.NoError and pix.loadFromData(reply.readAll()):
            self.poster_label.setPixmap(
                pix.scaledToWidth(POSTER_WIDTH, Qt.SmoothTransformation)
            )
        else:
            log_debug(f"Poster load failed for {self._poster_url}: {reply.errorString()}")
            self.poster_label.setText(self.poster_label.toolTip())

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
