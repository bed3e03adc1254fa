"""Unit tests for ListQuestionsUseCase."""

from askbase.application.knowledge_base import KnowledgeBase
from askbase.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
    PageNavigation,
)
from askbase.domain.value import QuestionOrder
from askbase.util.clock import ManualClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def seed_questions(env, count):
    kb = env.get(KnowledgeBase)
    clock = env.get(ManualClock)
    ids = []
    for n in range(count):
        ids.append(kb.add_question(f"Question {n}", "Body", ["python"], "alice"))
        clock.advance(minutes=1)
    return ids


class TestPageNavigation:
    """Tests for next/previous index arithmetic."""

    def test_first_page(self):
        """First of several pages."""
        nav = PageNavigation.for_page(0, 12, 5)

        assert nav.next_index == 5
        assert nav.prev_index is None
        assert nav.is_first_page
        assert not nav.is_last_page

    def test_last_page_wraps(self):
        """The next link of the last page goes back to the start."""
        nav = PageNavigation.for_page(10, 12, 5)

        assert nav.next_index == 0
        assert nav.prev_index == 5
        assert nav.is_last_page

    def test_exactly_full_last_page(self):
        """A page ending on the last match is the last page."""
        nav = PageNavigation.for_page(5, 10, 5)

        assert nav.is_last_page
        assert nav.next_index == 0


class TestListQuestionsRequest:
    """Tests for building requests from raw parameters."""

    def test_order_is_resolved_leniently(self):
        """Order names ignore case and unknown names mean newest."""
        assert (
            ListQuestionsRequest.from_params({"order": "Active"}).order
            == QuestionOrder.ACTIVE
        )
        assert (
            ListQuestionsRequest.from_params({"order": "bogus"}).order
            == QuestionOrder.NEWEST
        )

    def test_missing_search_means_everything(self):
        """A None search is the empty search."""
        assert ListQuestionsRequest.from_params({"search": None}).search == ""


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase.execute."""

    def test_lists_first_page(self, unit_env):
        """The first page holds the five newest questions."""
        # Arrange
        ids = seed_questions(unit_env, 7)
        use_case = unit_env.get(ListQuestionsUseCase)

        # Act
        response = use_case.execute(ListQuestionsRequest())

        # Assert
        assert [q.question_id for q in response.questions] == ids[::-1][:5]
        assert response.total == 7
        assert response.navigation.next_index == 5
        assert response.questions[0].meta == "1 minutes ago"
        assert response.questions[0].tag_names == ["python"]

    def test_raw_params(self, unit_env):
        """Raw parameters are validated into a request."""
        # Arrange
        ids = seed_questions(unit_env, 3)
        unit_env.get(KnowledgeBase).add_answer(ids[0], "Answer", "bob")

        # Act
        response = unit_env.get(ListQuestionsUseCase).execute(
            {"start_index": "0", "order": "unanswered", "search": None}
        )

        # Assert
        assert [q.question_id for q in response.questions] == [ids[2], ids[1]]
        assert response.order == QuestionOrder.UNANSWERED

    def test_non_string_order_falls_back_to_newest(self, unit_env):
        """A repeated order parameter is not an error."""
        # Arrange
        ids = seed_questions(unit_env, 2)

        # Act
        response = unit_env.get(ListQuestionsUseCase).execute(
            {"start_index": 0, "order": ["active"], "search": ""}
        )

        # Assert
        assert response.order == QuestionOrder.NEWEST
        assert [q.question_id for q in response.questions] == ids[::-1]

    def test_non_mapping_params_give_empty_listing(self, unit_env):
        """Parameters that aren't a mapping produce an empty page."""
        seed_questions(unit_env, 1)

        response = unit_env.get(ListQuestionsUseCase).execute("start_index=0")

        assert response.questions == []
        assert response.total == 0

    def test_invalid_params_give_empty_listing(self, unit_env):
        """Parameters that can't be validated produce an empty page."""
        seed_questions(unit_env, 2)

        response = unit_env.get(ListQuestionsUseCase).execute({"start_index": "abc"})

        assert response.questions == []
        assert response.total == 0

    def test_search(self, unit_env):
        """The search string filters the listing."""
        # Arrange
        kb = unit_env.get(KnowledgeBase)
        kb.add_question("Android studio crash", "Body", ["java"], "alice")
        kb.add_question("Routing", "Body", ["react"], "bob")
        kb.add_question("Pandas", "Body", ["python"], "carol")

        # Act
        response = unit_env.get(ListQuestionsUseCase).execute(
            ListQuestionsRequest(search="[react] android")
        )

        # Assert
        assert {q.title for q in response.questions} == {
            "Android studio crash",
            "Routing",
        }
        assert response.search == "[react] android"
