"""Unit tests for in-memory repositories."""

from askbase.domain.model import Tag
from askbase.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
)
from tests.conftest import make_answer, make_question


class TestIdAssignment:
    """Tests for next_id."""

    def test_ids_follow_collection_size(self):
        """The next id is <prefix>-<size + 1>."""
        repo = InMemoryQuestionRepository([make_question("q-1"), make_question("q-2")])

        assert repo.next_id() == "q-3"

    def test_ids_skip_numbers_already_taken(self):
        """Sparse seed ids never collide with new ones."""
        repo = InMemoryAnswerRepository([make_answer("ans-2")])

        assert repo.next_id() == "ans-3"

    def test_each_prefix(self):
        """Each store uses its own prefix."""
        assert InMemoryQuestionRepository().next_id() == "q-1"
        assert InMemoryAnswerRepository().next_id() == "ans-1"
        assert InMemoryTagRepository().next_id() == "tag-1"


class TestQuestionRepository:
    """Tests for InMemoryQuestionRepository."""

    def test_save_replaces_in_place(self):
        """Replacing a question keeps its position in find_all."""
        # Arrange
        repo = InMemoryQuestionRepository()
        first = repo.save(make_question("q-1"))
        repo.save(make_question("q-2"))

        # Act
        repo.save(first.with_view())

        # Assert
        assert [q.id for q in repo.find_all()] == ["q-1", "q-2"]
        assert repo.find_by_id("q-1").view_count == 1

    def test_find_all_returns_a_new_list(self):
        """Changing a returned list doesn't touch the store."""
        repo = InMemoryQuestionRepository([make_question("q-1")])

        repo.find_all().clear()

        assert len(repo.find_all()) == 1

    def test_count_by_tag(self):
        """Only questions carrying the tag are counted."""
        repo = InMemoryQuestionRepository(
            [
                make_question("q-1", tag_ids=("tag-1", "tag-2")),
                make_question("q-2", tag_ids=("tag-2",)),
                make_question("q-3"),
            ]
        )

        assert repo.count_by_tag("tag-2") == 2
        assert repo.count_by_tag("tag-1") == 1
        assert repo.count_by_tag("tag-9") == 0


class TestAnswerRepository:
    """Tests for InMemoryAnswerRepository."""

    def test_find_by_ids_skips_unknown(self):
        """Unknown answer ids are ignored."""
        repo = InMemoryAnswerRepository([make_answer("ans-1"), make_answer("ans-2")])

        found = repo.find_by_ids(["ans-2", "ans-9"])

        assert [a.id for a in found] == ["ans-2"]


class TestTagRepository:
    """Tests for InMemoryTagRepository."""

    def test_find_by_name_is_case_sensitive(self):
        """Name lookups match exactly."""
        repo = InMemoryTagRepository([Tag(id="tag-1", name="React")])

        assert repo.find_by_name("React").id == "tag-1"
        assert repo.find_by_name("react") is None

    def test_find_all_keeps_insertion_order(self):
        """Tags are listed in the order they were added."""
        repo = InMemoryTagRepository()
        repo.save(Tag(id="tag-1", name="zeta"))
        repo.save(Tag(id="tag-2", name="alpha"))

        assert [t.name for t in repo.find_all()] == ["zeta", "alpha"]
        assert repo.count() == 2
