"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Author Widgets"

DICE_GROUP_TITLE: str = "Two Dice"
DICE_ROLL_LEFT_BUTTON: str = "Roll Left"
DICE_ROLL_RIGHT_BUTTON: str = "Roll Right"

COUNTER_GROUP_TITLE: str = "Counter"
COUNTER_ADD_BUTTON: str = "Add One"
COUNTER_VALUE_TEMPLATE: str = "to {value}."

CHANGE_TYPE_GROUP_TITLE: str = "Question Type"
CHANGE_TYPE_BUTTON: str = "Change Type"
SHORT_ANSWER_LABEL: str = "Short Answer"
MULTIPLE_CHOICE_LABEL: str = "Multiple Choice"

HOLIDAY_GROUP_TITLE: str = "Holidays"
HOLIDAY_LABEL_TEMPLATE: str = "Holiday: {holiday}"
HOLIDAY_ALPHABET_BUTTON: str = "Advance By Alphabet"
HOLIDAY_YEAR_BUTTON: str = "Advance By Year"
