"""Domain models for quiz authoring."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from quiz_author.constants.quiz_constants import COPY_NAME_PREFIX


class QuestionType(str, Enum):
    """Known question kinds.

    Plain strings with the same value compare equal to the members, so kinds
    added later can travel through the core as bare strings.
    """

    SHORT_ANSWER = "short_answer_question"
    MULTIPLE_CHOICE = "multiple_choice_question"


@dataclass(slots=True)
class Question:
    """A single quiz question owned by whoever holds the list it sits in."""

    id: int
    name: str
    type: QuestionType | str
    body: str = ""
    expected: str = ""
    options: list[str] = field(default_factory=list)
    points: int = 0
    published: bool = False

    def copy(self, **changes) -> Question:
        """Return a new question with its own options list and ``changes`` applied."""
        changes.setdefault("options", self.options)
        changes["options"] = list(changes["options"])
        return replace(self, **changes)


@dataclass(slots=True)
class Answer:
    """A student's response slot for one question."""

    question_id: int
    text: str
    submitted: bool
    correct: bool


def make_blank_question(id: int, name: str, type: QuestionType | str) -> Question:
    """Create an unpublished question with no content and zero points."""
    return Question(id=id, name=name, type=type)


def duplicate_question(new_id: int, question: Question) -> Question:
    return question.copy(id=new_id, name=f"{COPY_NAME_PREFIX}{question.name}")


def toggle_question_type(question_type: QuestionType | str) -> QuestionType:
    if question_type == QuestionType.SHORT_ANSWER:
        return QuestionType.MULTIPLE_CHOICE
    return QuestionType.SHORT_ANSWER
