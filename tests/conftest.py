import os
import sys
from pathlib import Path

import pytest

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the repository root to sys.path so we can import quiz_author
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from quiz_author.core.models import Question, QuestionType  # noqa: E402


@pytest.fixture
def blank_questions() -> list[Question]:
    """Questions without body, expected answer, or options."""
    return [
        Question(1, "Question 1", QuestionType.SHORT_ANSWER),
        Question(47, "My New Question", QuestionType.MULTIPLE_CHOICE),
        Question(2, "Question 2", QuestionType.SHORT_ANSWER),
    ]


@pytest.fixture
def simple_questions() -> list[Question]:
    """A small quiz mixing published and unpublished questions."""
    return [
        Question(
            id=1,
            name="Addition",
            type=QuestionType.SHORT_ANSWER,
            body="What is 2+2?",
            expected="4",
            points=1,
            published=True,
        ),
        Question(
            id=2,
            name="Letters",
            type=QuestionType.SHORT_ANSWER,
            body="What is the last letter of the English alphabet?",
            expected="Z",
            points=1,
            published=False,
        ),
        Question(
            id=5,
            name="Colors",
            type=QuestionType.MULTIPLE_CHOICE,
            body="Which of these is a color?",
            expected="red",
            options=["red", "apple", "firetruck"],
            points=1,
            published=True,
        ),
        Question(
            id=9,
            name="Shapes",
            type=QuestionType.MULTIPLE_CHOICE,
            body="What shape can you make with one line?",
            expected="circle",
            options=["square", "triangle", "circle"],
            points=2,
            published=False,
        ),
    ]
