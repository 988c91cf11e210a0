"""Component showing two dice that are rolled independently."""

from __future__ import annotations

import logging
import random

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_author.constants.ui_constants import DICE_ROLL_LEFT_BUTTON, DICE_ROLL_RIGHT_BUTTON
from quiz_author.core.dice import INITIAL_LEFT_DIE, INITIAL_RIGHT_DIE, RollOutcome, d6, roll_outcome
from quiz_author.styling.styles import Styles

logger = logging.getLogger(__name__)


class TwoDicePanel(QWidget):
    """Two dice with their own roll buttons; matching dice win, snake eyes lose."""

    def __init__(self, rng: random.Random | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rng = rng
        self._left_die: int = INITIAL_LEFT_DIE
        self._right_die: int = INITIAL_RIGHT_DIE

        self._build_ui()
        self._refresh()

    @property
    def left_die(self) -> int:
        return self._left_die

    @property
    def right_die(self) -> int:
        return self._right_die

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        dice_row = QHBoxLayout()
        self.left_die_label = QLabel(self)
        self.left_die_label.setStyleSheet(Styles.get_die_label_style())
        dice_row.addWidget(self.left_die_label)

        self.roll_left_button = QPushButton(DICE_ROLL_LEFT_BUTTON, self)
        self.roll_left_button.clicked.connect(self._handle_roll_left)
        dice_row.addWidget(self.roll_left_button)

        self.roll_right_button = QPushButton(DICE_ROLL_RIGHT_BUTTON, self)
        self.roll_right_button.clicked.connect(self._handle_roll_right)
        dice_row.addWidget(self.roll_right_button)

        self.right_die_label = QLabel(self)
        self.right_die_label.setStyleSheet(Styles.get_die_label_style())
        dice_row.addWidget(self.right_die_label)
        layout.addLayout(dice_row)

        self.result_label = QLabel(self)
        layout.addWidget(self.result_label)

    def _handle_roll_left(self) -> None:
        self._left_die = d6(self._rng)
        logger.debug("Rolled left die: %s", self._left_die)
        self._refresh()

    def _handle_roll_right(self) -> None:
        self._right_die = d6(self._rng)
        logger.debug("Rolled right die: %s", self._right_die)
        self._refresh()

    def _refresh(self) -> None:
        self.left_die_label.setText(str(self._left_die))
        self.right_die_label.setText(str(self._right_die))

        outcome = roll_outcome(self._left_die, self._right_die)
        if outcome is None:
            self.result_label.setText("")
            self.result_label.setVisible(False)
            return
        self.result_label.setText(outcome.value)
        self.result_label.setStyleSheet(Styles.get_roll_result_style(outcome is RollOutcome.WIN))
        self.result_label.setVisible(True)
