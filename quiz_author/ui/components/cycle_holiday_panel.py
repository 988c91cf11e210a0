"""Component that steps through holidays alphabetically or by date."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_author.constants.ui_constants import (
    HOLIDAY_ALPHABET_BUTTON,
    HOLIDAY_LABEL_TEMPLATE,
    HOLIDAY_YEAR_BUTTON,
)
from quiz_author.core.holidays import INITIAL_HOLIDAY, Holiday, next_by_alphabet, next_by_year

logger = logging.getLogger(__name__)


class CycleHolidayPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._holiday: Holiday = INITIAL_HOLIDAY
        self._build_ui()
        self._refresh()

    @property
    def holiday(self) -> Holiday:
        return self._holiday

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.holiday_label = QLabel(self)
        layout.addWidget(self.holiday_label)

        button_row = QHBoxLayout()
        self.alphabet_button = QPushButton(HOLIDAY_ALPHABET_BUTTON, self)
        self.alphabet_button.clicked.connect(lambda: self._advance(next_by_alphabet))
        button_row.addWidget(self.alphabet_button)

        self.year_button = QPushButton(HOLIDAY_YEAR_BUTTON, self)
        self.year_button.clicked.connect(lambda: self._advance(next_by_year))
        button_row.addWidget(self.year_button)
        layout.addLayout(button_row)

    def _advance(self, step: callable) -> None:
        self._holiday = step(self._holiday)
        logger.debug("Holiday advanced to %s", self._holiday.name)
        self._refresh()

    def _refresh(self) -> None:
        self.holiday_label.setText(HOLIDAY_LABEL_TEMPLATE.format(holiday=self._holiday.value))
