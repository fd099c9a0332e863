import sys
from PySide6.QtWidgets import QApplication, QMessageBox

from beckNight.settings    import CATALOG_PATH
from beckNight.utils       import apply_dark_palette, log_debug
from beckNight.catalog     import CatalogError, load_catalog
from beckNight.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> int:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    try:
        catalog = load_catalog(CATALOG_PATH)
    except (OSError, CatalogError) as e:
        log_debug(f"Catalog load failed: {e}")
        QMessageBox.critical(None, "Beck Night", f"Kunde inte läsa filmlistan:\n{e}")
        return 1

    # the window lives as long as this frame, i.e. the whole event loop
    window = MainWindow(catalog)
    window.show()
    return app.exec()

# Python entry-point guard
if __name__ == "__main__":
    sys.exit(main())
