"""Question ordering.

Each QuestionOrder maps to a pure sort. UNANSWERED also narrows the
result set to questions without answers.
"""

from datetime import datetime
from typing import Iterable

from askbase.domain.model.question import Question
from askbase.domain.value import QuestionOrder


def _newest(questions: list[Question]) -> list[Question]:
    return sorted(questions, key=lambda q: q.asked_at, reverse=True)


def _active(questions: list[Question]) -> list[Question]:
    # Unanswered questions sort as if last answered at the earliest instant
    return sorted(
        questions,
        key=lambda q: (q.last_answer_at or datetime.min, q.asked_at),
        reverse=True,
    )


def _unanswered(questions: list[Question]) -> list[Question]:
    return _newest([q for q in questions if q.answer_count == 0])


def sort_questions(
    questions: Iterable[Question], order: QuestionOrder | str | None
) -> list[Question]:
    """Order questions for display.

    Args:
        questions: Questions to order (not modified)
        order: QuestionOrder or its name; unknown names mean NEWEST

    Returns:
        A new list in display order
    """
    if not isinstance(order, QuestionOrder):
        order = QuestionOrder.from_name(order)

    questions = list(questions)
    if order == QuestionOrder.ACTIVE:
        return _active(questions)
    elif order == QuestionOrder.UNANSWERED:
        return _unanswered(questions)
    return _newest(questions)
