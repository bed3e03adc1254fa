"""Unit tests for question ordering."""

from datetime import datetime

from askbase.domain.service import sort_questions
from askbase.domain.value import QuestionOrder
from tests.conftest import make_answer, make_question


def _ids(questions):
    return [q.id for q in questions]


class TestNewestOrder:
    """Tests for the newest ordering."""

    def test_sorts_by_asked_at_descending(self):
        """Most recently asked questions come first."""
        # Arrange
        questions = [
            make_question("q-1", asked_at=datetime(2024, 1, 1)),
            make_question("q-2", asked_at=datetime(2024, 3, 1)),
            make_question("q-3", asked_at=datetime(2024, 2, 1)),
        ]

        # Act
        result = sort_questions(questions, QuestionOrder.NEWEST)

        # Assert
        assert _ids(result) == ["q-2", "q-3", "q-1"]

    def test_input_is_not_modified(self):
        """Sorting returns a new list."""
        questions = [
            make_question("q-1", asked_at=datetime(2024, 1, 1)),
            make_question("q-2", asked_at=datetime(2024, 3, 1)),
        ]

        sort_questions(questions, QuestionOrder.NEWEST)

        assert _ids(questions) == ["q-1", "q-2"]

    def test_unknown_name_falls_back_to_newest(self):
        """Unrecognized order names sort newest first."""
        questions = [
            make_question("q-1", asked_at=datetime(2024, 1, 1)),
            make_question("q-2", asked_at=datetime(2024, 3, 1)),
        ]

        assert _ids(sort_questions(questions, "bogus")) == ["q-2", "q-1"]


class TestActiveOrder:
    """Tests for the active ordering."""

    def test_most_recent_answer_first_then_unanswered_by_asked_at(self):
        """Answered questions sort by last answer, unanswered ones trail."""
        # Arrange
        old_but_active = make_question(
            "q-1", asked_at=datetime(2023, 1, 1)
        ).with_answer(make_answer("ans-1", posted_at=datetime(2024, 6, 1)))
        answered_earlier = make_question(
            "q-2", asked_at=datetime(2024, 1, 1)
        ).with_answer(make_answer("ans-2", posted_at=datetime(2024, 2, 1)))
        unanswered_new = make_question("q-3", asked_at=datetime(2024, 5, 1))
        unanswered_old = make_question("q-4", asked_at=datetime(2024, 4, 1))

        # Act
        result = sort_questions(
            [unanswered_old, answered_earlier, unanswered_new, old_but_active],
            "ACTIVE",
        )

        # Assert
        assert _ids(result) == ["q-1", "q-2", "q-3", "q-4"]

    def test_ties_broken_by_asked_at(self):
        """Equal last answer times fall back to newest asked first."""
        moment = datetime(2024, 6, 1)
        first = make_question("q-1", asked_at=datetime(2024, 1, 1)).with_answer(
            make_answer("ans-1", posted_at=moment)
        )
        second = make_question("q-2", asked_at=datetime(2024, 2, 1)).with_answer(
            make_answer("ans-2", posted_at=moment)
        )

        result = sort_questions([first, second], QuestionOrder.ACTIVE)

        assert _ids(result) == ["q-2", "q-1"]


class TestUnansweredOrder:
    """Tests for the unanswered ordering."""

    def test_keeps_only_unanswered_newest_first(self):
        """Answered questions are removed from the result."""
        # Arrange
        answered = make_question("q-1", asked_at=datetime(2024, 9, 1)).with_answer(
            make_answer("ans-1")
        )
        older = make_question("q-2", asked_at=datetime(2024, 1, 1))
        newer = make_question("q-3", asked_at=datetime(2024, 2, 1))

        # Act
        result = sort_questions([answered, older, newer], "unanswered")

        # Assert
        assert _ids(result) == ["q-3", "q-2"]
