"""Pure operations over a list of quiz questions.

Nothing in this module mutates its input. Operations that "edit" a question
return a new list built from ``Question.copy`` so the options lists of the
result are never shared with the caller's records.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from quiz_author.constants.quiz_constants import (
    APPEND_OPTION_INDEX,
    CSV_FALSE,
    CSV_HEADER,
    CSV_SEPARATOR,
    CSV_TRUE,
)
from quiz_author.core.models import (
    Answer,
    Question,
    QuestionType,
    duplicate_question,
    make_blank_question,
)

logger = logging.getLogger(__name__)


def _copy_all(questions: Sequence[Question]) -> list[Question]:
    return [question.copy() for question in questions]


def get_published_questions(questions: Sequence[Question]) -> list[Question]:
    """Return only the published questions, in their original order."""
    return [question.copy() for question in questions if question.published]


def get_non_empty_questions(questions: Sequence[Question]) -> list[Question]:
    """Return the questions that have a body, an expected answer, or any option."""
    return [
        question.copy()
        for question in questions
        if question.body != "" or question.expected != "" or len(question.options) >= 1
    ]


def find_question(questions: Sequence[Question], id: int) -> Question | None:
    """Return a copy of the first question with ``id``, or ``None`` when absent."""
    found = next((question for question in questions if question.id == id), None)
    return found.copy() if found is not None else None


def remove_question(questions: Sequence[Question], id: int) -> list[Question]:
    """Drop every question carrying ``id``."""
    return [question.copy() for question in questions if question.id != id]


def get_names(questions: Sequence[Question]) -> list[str]:
    return [question.name for question in questions]


def sum_points(questions: Sequence[Question]) -> int:
    return sum(question.points for question in questions)


def sum_published_points(questions: Sequence[Question]) -> int:
    return sum(question.points for question in questions if question.published)


def to_csv(questions: Sequence[Question]) -> str:
    """Render the questions as CSV text.

    The ``options`` column holds the number of options, not their text. Fields
    are not quoted, so names containing commas produce ambiguous rows.

    Example::

        id,name,options,points,published
        1,Addition,0,1,true
        5,Colors,3,1,true
    """
    lines = [CSV_HEADER]
    lines.extend(_csv_row(question) for question in questions)
    return "\n".join(lines)


def _csv_row(question: Question) -> str:
    fields = (
        str(question.id),
        question.name,
        str(len(question.options)),
        str(question.points),
        CSV_TRUE if question.published else CSV_FALSE,
    )
    return CSV_SEPARATOR.join(fields)


def make_answers(questions: Sequence[Question]) -> list[Answer]:
    """Create one empty, unsubmitted answer per question."""
    return [
        Answer(question_id=question.id, text="", submitted=False, correct=False)
        for question in questions
    ]


def publish_all(questions: Sequence[Question]) -> list[Question]:
    return [question.copy(published=True) for question in questions]


def same_type(questions: Sequence[Question]) -> bool:
    """Whether every question shares the first question's type (true when empty)."""
    if not questions:
        return True
    first_type = questions[0].type
    return all(question.type == first_type for question in questions)


def add_new_question(
    questions: Sequence[Question],
    id: int,
    name: str,
    type: QuestionType | str,
) -> list[Question]:
    """Append a blank question to a copy of ``questions``."""
    copied = _copy_all(questions)
    copied.append(make_blank_question(id, name, type))
    return copied


def rename_question_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_name: str,
) -> list[Question]:
    return [
        question.copy(name=new_name) if question.id == target_id else question.copy()
        for question in questions
    ]


def change_question_type_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_question_type: QuestionType | str,
) -> list[Question]:
    """Retype the matching question.

    Switching away from multiple choice clears that question's options.
    Switching to multiple choice leaves the options as they are.
    """
    result: list[Question] = []
    for question in questions:
        if question.id != target_id:
            result.append(question.copy())
            continue
        if new_question_type == QuestionType.MULTIPLE_CHOICE:
            result.append(question.copy(type=new_question_type))
        else:
            result.append(question.copy(type=new_question_type, options=[]))
    return result


def _add_or_replace_option(
    question: Question,
    target_option_index: int,
    new_option: str,
) -> list[str]:
    options = list(question.options)
    if target_option_index == APPEND_OPTION_INDEX:
        options.append(new_option)
        return options
    if not 0 <= target_option_index < len(options):
        raise IndexError(
            f"Option index {target_option_index} out of range for question {question.id}"
        )
    options[target_option_index] = new_option
    return options


def edit_option(
    questions: Sequence[Question],
    target_id: int,
    target_option_index: int,
    new_option: str,
) -> list[Question]:
    """Append (index ``-1``) or replace an option on the matching question.

    Raises:
        IndexError: if the index is neither ``-1`` nor an existing position in
            the matching question's options.
    """
    return [
        question.copy(options=_add_or_replace_option(question, target_option_index, new_option))
        if question.id == target_id
        else question.copy()
        for question in questions
    ]


def duplicate_question_in_array(
    questions: Sequence[Question],
    target_id: int,
    new_id: int,
) -> list[Question]:
    """Insert a duplicate of the first question with ``target_id`` right after it."""
    copied = _copy_all(questions)
    index = next(
        (position for position, question in enumerate(copied) if question.id == target_id),
        None,
    )
    if index is None:
        logger.debug("No question with id %s to duplicate", target_id)
        return copied

    copied.insert(index + 1, duplicate_question(new_id, copied[index]))
    return copied
