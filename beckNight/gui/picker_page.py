from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QSpinBox,
    QCheckBox, QLabel, QProgressBar, QStackedWidget,
)

from ..settings import LOADING_DELAY_MS
from ..utils import log_debug
from ..catalog.models import Catalog, MovieRecord
from .movie_card import MovieCard
from .picker import MoviePicker, PickerState, PickerError, MSG_GENERIC


class PickerPage(QWidget):
    """
    Range inputs + "all movies" toggle + generate button over a stacked
    result area with one page per `PickerState`.
    """
    stateChanged = Signal(object)      # PickerState

    def __init__(self, movies: Catalog | list[MovieRecord], parent=None, *,
                 loading_delay_ms: int = LOADING_DELAY_MS, rng=None):
        super().__init__(parent)
        self.picker = MoviePicker(movies, rng=rng)
        self.loading_delay_ms = loading_delay_ms
        self.state = PickerState.IDLE
        self.current_movie: MovieRecord | None = None
        self.error_message = ""

        self._pending: tuple[int, int] | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._finish_generation)

        self._renderers = {
            PickerState.IDLE:      self._render_idle,
            PickerState.LOADING:   self._render_loading,
            PickerState.DISPLAYED: self._render_displayed,
            PickerState.ERRORED:   self._render_errored,
        }
        self._build_ui()
        self._connect_signals()
        self._validate()

    def _build_ui(self) -> None:
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(16)

        # ── controls ─────────────────────────────────────────────────────
        controls = QHBoxLayout()
        self.range_selector = QWidget()
        rs = QHBoxLayout(self.range_selector)
        rs.setContentsMargins(0, 0, 0, 0)
        size = max(1, self.picker.size)
        self.min_spin = QSpinBox()
        self.max_spin = QSpinBox()
        for spin, value in ((self.min_spin, 1), (self.max_spin, size)):
            spin.setRange(1, size)
            spin.setValue(value)
        rs.addWidget(QLabel("Från film nr"))
        rs.addWidget(self.min_spin)
        rs.addWidget(QLabel("till"))
        rs.addWidget(self.max_spin)
        controls.addWidget(self.range_selector)

        self.all_movies_check = QCheckBox("Alla filmer")
        controls.addWidget(self.all_movies_check)
        controls.addStretch()
        self.generate_btn = QPushButton("Slumpa en Beck-film")
        controls.addWidget(self.generate_btn)
        main_layout.addLayout(controls)

        # ── one page per state ───────────────────────────────────────────
        self.pages = QStackedWidget()

        self.idle_page = QLabel("Välj ett intervall och tryck på knappen.", alignment=Qt.AlignCenter)

        self.loading_page = QWidget()
        lp = QVBoxLayout(self.loading_page)
        lp.addStretch()
        lp.addWidget(QLabel("Letar fram en Beck-film…", alignment=Qt.AlignCenter))
        busy = QProgressBar()
        busy.setRange(0, 0)
        busy.setTextVisible(False)
        lp.addWidget(busy)
        lp.addStretch()

        self.movie_card = MovieCard()

        self.error_page = QWidget()
        ep = QVBoxLayout(self.error_page)
        self.error_label = QLabel(alignment=Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color:#ff6b6b; font-weight:bold;")
        ep.addWidget(self.error_label)

        for page in (self.idle_page, self.loading_page, self.movie_card, self.error_page):
            self.pages.addWidget(page)
        main_layout.addWidget(self.pages, 1)

    def _connect_signals(self) -> None:
        self.generate_btn.clicked.connect(self.generate)
        self.min_spin.valueChanged.connect(self._validate)
        self.max_spin.valueChanged.connect(self._validate)
        self.min_spin.editingFinished.connect(lambda: self._clamp("min"))
        self.max_spin.editingFinished.connect(lambda: self._clamp("max"))
        self.all_movies_check.toggled.connect(self._toggle_all_movies)

    # ───────────────────────────────────────────────────────── range handling
    def _clamp(self, edited: str) -> None:
        lo, hi = self.picker.clamp_range(self.min_spin.value(), self.max_spin.value(), edited)
        self.min_spin.setValue(lo)
        self.max_spin.setValue(hi)
        self._validate()

    @Slot(bool)
    def _toggle_all_movies(self, checked: bool) -> None:
        self.range_selector.setEnabled(not checked)        # dimmed
        self._validate()

    @Slot()
    def _validate(self) -> bool:
        valid = self.picker.is_valid_range(
            self.min_spin.value(), self.max_spin.value(), self.all_movies_check.isChecked()
        )
        self.generate_btn.setEnabled(valid)
        return valid

    def keyPressEvent(self, event) -> None:
        if event.key() in (Qt.Key_Return, Qt.Key_Enter) and self.generate_btn.isEnabled():
            self.generate()
            return
        super().keyPressEvent(event)

    # ───────────────────────────────────────────────────────────── generate
    @Slot()
    def generate(self) -> None:
        """Validate the range, show the loading page, pick after the delay."""
        if self.state is PickerState.LOADING:
            return                                  # one pick at a time
        try:
            self._pending = self.picker.effective_range(
                self.min_spin.value(), self.max_spin.value(), self.all_movies_check.isChecked()
            )
        except PickerError as exc:
            self._show_error(exc.message)
            return
        self._set_state(PickerState.LOADING)
        self._timer.start(self.loading_delay_ms)

    @Slot()
    def _finish_generation(self) -> None:
        lo, hi = self._pending
        self._pending = None
        try:
            movie = self.picker.pick(lo, hi)
        except PickerError as exc:
            log_debug(f"Pick failed: {exc}")
            self._show_error(exc.message)
            return
        except Exception as exc:
            log_debug(f"Error generating random movie: {exc!r}")
            self._show_error(MSG_GENERIC)
            return
        self.current_movie = movie
        self._set_state(PickerState.DISPLAYED)

    # ───────────────────────────────────────────────────────────── states
    def _show_error(self, message: str) -> None:
        self.error_message = message
        self._set_state(PickerState.ERRORED)

    def _set_state(self, state: PickerState) -> None:
        self.state = state
        self._renderers[state]()
        self.stateChanged.emit(state)

    def _render_idle(self) -> None:
        self.pages.setCurrentWidget(self.idle_page)

    def _render_loading(self) -> None:
        self.pages.setCurrentWidget(self.loading_page)

    def _render_displayed(self) -> None:
        self.movie_card.set_movie(self.current_movie)
        self.pages.setCurrentWidget(self.movie_card)

    def _render_errored(self) -> None:
        self.error_label.setText(self.error_message)
        self.pages.setCurrentWidget(self.error_page)
