"""Component that flips a question between short answer and multiple choice."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_author.constants.ui_constants import (
    CHANGE_TYPE_BUTTON,
    MULTIPLE_CHOICE_LABEL,
    SHORT_ANSWER_LABEL,
)
from quiz_author.core.models import QuestionType, toggle_question_type

logger = logging.getLogger(__name__)


class ChangeTypePanel(QWidget):
    """Shows the current question type and toggles it on each click."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._question_type: QuestionType = QuestionType.SHORT_ANSWER
        self._build_ui()
        self._refresh()

    @property
    def question_type(self) -> QuestionType:
        return self._question_type

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.change_button = QPushButton(CHANGE_TYPE_BUTTON, self)
        self.change_button.clicked.connect(self._handle_change_type)
        layout.addWidget(self.change_button)

        self.type_label = QLabel(self)
        layout.addWidget(self.type_label)

    def _handle_change_type(self) -> None:
        self._question_type = toggle_question_type(self._question_type)
        logger.debug("Question type changed to %s", self._question_type.value)
        self._refresh()

    def _refresh(self) -> None:
        if self._question_type == QuestionType.MULTIPLE_CHOICE:
            self.type_label.setText(MULTIPLE_CHOICE_LABEL)
        else:
            self.type_label.setText(SHORT_ANSWER_LABEL)
