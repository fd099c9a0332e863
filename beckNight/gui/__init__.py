"""
gui
~~~
Qt widgets for the Beck movie picker.

•  Range rules and the random draw live in `gui.picker` (no Qt).
•  Re-export the high-level symbols so the app can simply:

    from beckNight.gui import MainWindow
"""

from beckNight.gui.picker      import (
    MoviePicker, PickerState, PickerError, InvalidRangeError, MovieNotFoundError,
)
from beckNight.gui.movie_card  import MovieCard
from beckNight.gui.picker_page import PickerPage
from beckNight.gui.main_window import MainWindow

__all__ = [
    "MoviePicker", "PickerState", "PickerError", "InvalidRangeError", "MovieNotFoundError",
    "MovieCard", "PickerPage", "MainWindow",
]
