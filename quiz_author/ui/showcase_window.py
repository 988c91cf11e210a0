"""Qt main window hosting the demo widgets."""

from __future__ import annotations

import random

from PySide6.QtWidgets import QGroupBox, QMainWindow, QVBoxLayout, QWidget

from quiz_author.constants.ui_constants import (
    CHANGE_TYPE_GROUP_TITLE,
    COUNTER_GROUP_TITLE,
    DICE_GROUP_TITLE,
    HOLIDAY_GROUP_TITLE,
    WINDOW_TITLE,
)
from quiz_author.styling.color_palette import Theme
from quiz_author.styling.styles import Styles
from quiz_author.ui.components.change_type_panel import ChangeTypePanel
from quiz_author.ui.components.counter_panel import CounterPanel
from quiz_author.ui.components.cycle_holiday_panel import CycleHolidayPanel
from quiz_author.ui.components.two_dice_panel import TwoDicePanel


class ShowcaseWindow(QMainWindow):
    """Main window stacking each widget in its own group box."""

    def __init__(self, theme: Theme = Theme.LIGHT, rng: random.Random | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self._theme = theme

        self._build_ui(rng)
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

    def _build_ui(self, rng: random.Random | None) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.dice_panel = TwoDicePanel(rng=rng, parent=self)
        self.counter_panel = CounterPanel(self)
        self.change_type_panel = ChangeTypePanel(self)
        self.holiday_panel = CycleHolidayPanel(self)

        for title, panel in (
            (DICE_GROUP_TITLE, self.dice_panel),
            (COUNTER_GROUP_TITLE, self.counter_panel),
            (CHANGE_TYPE_GROUP_TITLE, self.change_type_panel),
            (HOLIDAY_GROUP_TITLE, self.holiday_panel),
        ):
            root_layout.addWidget(self._wrap_in_group(title, panel))
        root_layout.addStretch(1)

    def _wrap_in_group(self, title: str, panel: QWidget) -> QGroupBox:
        group = QGroupBox(title, self)
        group_layout = QVBoxLayout()
        group.setLayout(group_layout)
        group_layout.addWidget(panel)
        return group
