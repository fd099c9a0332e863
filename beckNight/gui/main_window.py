# gui/main_window.py
from __future__ import annotations

from PySide6.QtGui     import QAction
from PySide6.QtWidgets import QMainWindow

from beckNight.catalog.models    import Catalog, MovieRecord
from beckNight.gui.picker_page   import PickerPage


class MainWindow(QMainWindow):
    def __init__(self, movies: Catalog | list[MovieRecord], **picker_options):
        super().__init__()
        self.setWindowTitle("Beck Night")
        self.resize(860, 560)

        self.picker_page = PickerPage(movies, self, **picker_options)
        self.setCentralWidget(self.picker_page)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        self.reroll_action = QAction("Slumpa igen", self)
        self.reroll_action.setShortcut("Ctrl+R")
        self.reroll_action.triggered.connect(self.picker_page.generate)
        tb.addAction(self.reroll_action)
