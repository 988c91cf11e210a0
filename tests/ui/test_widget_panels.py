"""Unit tests for the demo widget panels."""

import pytest
from PySide6.QtCore import Qt

from quiz_author.core.holidays import Holiday
from quiz_author.core.models import QuestionType
from quiz_author.ui.components.change_type_panel import ChangeTypePanel
from quiz_author.ui.components.counter_panel import CounterPanel
from quiz_author.ui.components.cycle_holiday_panel import CycleHolidayPanel
from quiz_author.ui.components.two_dice_panel import TwoDicePanel


class _FixedRolls:
    """Stand-in random source that returns a scripted sequence of die faces."""

    def __init__(self, faces):
        self._faces = list(faces)

    def randint(self, a, b):
        return self._faces.pop(0)


@pytest.fixture
def dice_factory(qtbot):
    def _make(faces):
        panel = TwoDicePanel(rng=_FixedRolls(faces))
        qtbot.addWidget(panel)
        panel.show()
        return panel

    return _make


class TestTwoDicePanel:
    def test_initial_dice(self, dice_factory):
        panel = dice_factory([])
        assert panel.left_die_label.text() == "1"
        assert panel.right_die_label.text() == "2"
        assert panel.result_label.text() == ""
        assert not panel.result_label.isVisible()

    def test_roll_left_updates_only_left(self, qtbot, dice_factory):
        panel = dice_factory([5])
        qtbot.mouseClick(panel.roll_left_button, Qt.MouseButton.LeftButton)
        assert panel.left_die == 5
        assert panel.right_die == 2
        assert panel.left_die_label.text() == "5"

    def test_snake_eyes_lose(self, qtbot, dice_factory):
        panel = dice_factory([1])
        qtbot.mouseClick(panel.roll_right_button, Qt.MouseButton.LeftButton)
        assert panel.result_label.text() == "Lose"
        assert panel.result_label.isVisible()

    def test_matching_dice_win(self, qtbot, dice_factory):
        panel = dice_factory([2])
        qtbot.mouseClick(panel.roll_left_button, Qt.MouseButton.LeftButton)
        assert panel.result_label.text() == "Win"

    def test_result_clears_after_mismatch(self, qtbot, dice_factory):
        panel = dice_factory([2, 4])
        qtbot.mouseClick(panel.roll_left_button, Qt.MouseButton.LeftButton)
        qtbot.mouseClick(panel.roll_right_button, Qt.MouseButton.LeftButton)
        assert panel.result_label.text() == ""


class TestCounterPanel:
    def test_counts_clicks(self, qtbot):
        panel = CounterPanel()
        qtbot.addWidget(panel)
        panel.show()
        assert panel.value_label.text() == "to 0."

        for _ in range(3):
            qtbot.mouseClick(panel.add_button, Qt.MouseButton.LeftButton)

        assert panel.value == 3
        assert panel.value_label.text() == "to 3."


class TestChangeTypePanel:
    def test_toggles_between_types(self, qtbot):
        panel = ChangeTypePanel()
        qtbot.addWidget(panel)
        panel.show()
        assert panel.question_type is QuestionType.SHORT_ANSWER
        assert panel.type_label.text() == "Short Answer"

        qtbot.mouseClick(panel.change_button, Qt.MouseButton.LeftButton)
        assert panel.question_type is QuestionType.MULTIPLE_CHOICE
        assert panel.type_label.text() == "Multiple Choice"

        qtbot.mouseClick(panel.change_button, Qt.MouseButton.LeftButton)
        assert panel.type_label.text() == "Short Answer"


class TestCycleHolidayPanel:
    def test_starts_on_christmas(self, qtbot):
        panel = CycleHolidayPanel()
        qtbot.addWidget(panel)
        panel.show()
        assert panel.holiday_label.text() == "Holiday: 🎄"

    def test_advance_by_alphabet(self, qtbot):
        panel = CycleHolidayPanel()
        qtbot.addWidget(panel)
        panel.show()
        qtbot.mouseClick(panel.alphabet_button, Qt.MouseButton.LeftButton)
        assert panel.holiday is Holiday.EASTER
        assert panel.holiday_label.text() == "Holiday: 🐰"

    def test_advance_by_year(self, qtbot):
        panel = CycleHolidayPanel()
        qtbot.addWidget(panel)
        panel.show()
        qtbot.mouseClick(panel.year_button, Qt.MouseButton.LeftButton)
        assert panel.holiday is Holiday.VALENTINES
        qtbot.mouseClick(panel.year_button, Qt.MouseButton.LeftButton)
        assert panel.holiday_label.text() == "Holiday: 🍀"
