"""Component with a button that counts its own clicks."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from quiz_author.constants.ui_constants import COUNTER_ADD_BUTTON, COUNTER_VALUE_TEMPLATE

logger = logging.getLogger(__name__)


class CounterPanel(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._value: int = 0
        self._build_ui()

    @property
    def value(self) -> int:
        return self._value

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        self.add_button = QPushButton(COUNTER_ADD_BUTTON, self)
        self.add_button.clicked.connect(self._handle_add_one)
        layout.addWidget(self.add_button)

        self.value_label = QLabel(COUNTER_VALUE_TEMPLATE.format(value=self._value), self)
        layout.addWidget(self.value_label)
        layout.addStretch(1)

    def _handle_add_one(self) -> None:
        self._value += 1
        logger.debug("Counter is now %s", self._value)
        self.value_label.setText(COUNTER_VALUE_TEMPLATE.format(value=self._value))
