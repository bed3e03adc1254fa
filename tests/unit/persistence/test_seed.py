"""Unit tests for seed payloads."""

import json
import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from askbase.application.knowledge_base import KnowledgeBase
from askbase.persistence.seed import SeedData, load_seed
from askbase.util.clock import ManualClock
from askbase.util.error import ConfigurationError
from tests.di import build_test_container

PAYLOAD = {
    "tags": [{"id": "tag-1", "name": "react"}, {"id": "tag-2", "name": "android"}],
    "answers": [
        {
            "id": "ans-1",
            "text": "Use a router",
            "authored_by": "hamkalo",
            "posted_at": "2023-11-20T03:24:42",
        },
        {
            "id": "ans-2",
            "text": "Or a link",
            "authored_by": "azad",
            "posted_at": "2023-11-23T08:24:00",
        },
    ],
    "questions": [
        {
            "id": "q-1",
            "title": "Programmatically navigate using React router",
            "text": "the alert shows the proper index...",
            "tag_ids": ["tag-1", "tag-2"],
            "authored_by": "JoJi John",
            "asked_at": "2022-01-20T03:00:00",
            "answer_ids": ["ans-2", "ans-1"],
            "view_count": 10,
        },
        {
            "id": "q-2",
            "title": "Unanswered",
            "text": "...",
            "tag_ids": ["tag-2"],
            "authored_by": "saltyPeter",
            "asked_at": "2023-01-10T11:24:30",
        },
    ],
}


class TestSeedData:
    """Tests for SeedData validation and building."""

    def test_build_questions_derives_last_answer_at(self):
        """last_answer_at is the newest referenced answer."""
        # Arrange
        seed = SeedData.model_validate(PAYLOAD)

        # Act
        questions = {q.id: q for q in seed.build_questions()}

        # Assert
        assert questions["q-1"].last_answer_at == datetime(2023, 11, 23, 8, 24)
        assert questions["q-1"].view_count == 10
        assert questions["q-2"].last_answer_at is None

    def test_unknown_tag_reference_rejected(self):
        """Questions can only reference tags in the payload."""
        payload = json.loads(json.dumps(PAYLOAD))
        payload["questions"][1]["tag_ids"] = ["tag-9"]

        with pytest.raises(ValidationError, match="unknown tags"):
            SeedData.model_validate(payload)

    def test_unknown_answer_reference_rejected(self):
        """Questions can only reference answers in the payload."""
        payload = json.loads(json.dumps(PAYLOAD))
        payload["questions"][1]["answer_ids"] = ["ans-9"]

        with pytest.raises(ValidationError, match="unknown answers"):
            SeedData.model_validate(payload)

    def test_shared_answer_rejected(self):
        """An answer belongs to one question only."""
        payload = json.loads(json.dumps(PAYLOAD))
        payload["questions"][1]["answer_ids"] = ["ans-1"]

        with pytest.raises(ValidationError, match="more than one question"):
            SeedData.model_validate(payload)

    def test_duplicate_ids_rejected(self):
        """Ids are unique within each collection."""
        payload = json.loads(json.dumps(PAYLOAD))
        payload["tags"].append({"id": "tag-1", "name": "other"})

        with pytest.raises(ValidationError, match="Duplicate tag ids"):
            SeedData.model_validate(payload)


class TestLoadSeed:
    """Tests for load_seed."""

    def test_loads_json_file(self, tmp_path):
        """A valid file produces SeedData."""
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(PAYLOAD), encoding="utf-8")

        seed = load_seed(path)

        assert len(seed.questions) == 2
        assert len(seed.answers) == 2
        assert len(seed.tags) == 2

    def test_missing_file_raises_configuration_error(self, tmp_path):
        """Unreadable files are a configuration problem."""
        with pytest.raises(ConfigurationError, match="Cannot read seed file"):
            load_seed(tmp_path / "missing.json")

    def test_invalid_payload_raises_configuration_error(self, tmp_path):
        """Malformed payloads are a configuration problem."""
        path = tmp_path / "seed.json"
        path.write_text('{"questions": [{"id": "q-1"}]}', encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid seed file"):
            load_seed(path)


class TestUtcTimestamps:
    """Seed payloads written with UTC timestamps ("...Z")."""

    @pytest.fixture
    def kb(self):
        payload = json.loads(json.dumps(PAYLOAD))
        payload["answers"][0]["posted_at"] = "2023-11-20T03:24:42Z"
        payload["answers"][1]["posted_at"] = "2023-11-23T08:24:00+00:00"
        for question in payload["questions"]:
            question["asked_at"] += "Z"
        seed = SeedData.model_validate(payload)
        return KnowledgeBase.create(seed=seed, clock=ManualClock())

    def test_timestamps_are_stored_naive(self, kb):
        """Aware values become naive local time."""
        question = kb.get_question_by_id("q-1")

        assert question.asked_at.tzinfo is None
        assert question.last_answer_at.tzinfo is None
        assert all(a.posted_at.tzinfo is None for a in kb.get_answers())

    def test_local_time_is_preserved(self, kb):
        """Conversion keeps the instant, only the zone changes."""
        expected = (
            datetime(2023, 11, 20, 3, 24, 42, tzinfo=timezone.utc)
            .astimezone()
            .replace(tzinfo=None)
        )

        assert kb.get_answers()[0].posted_at == expected

    def test_active_listing_mixes_answered_and_unanswered(self, kb):
        """Active ordering compares seeded and missing answer times."""
        page = kb.get_questions_by_filter(0, "active", "")

        assert [q.id for q in page.questions] == ["q-1", "q-2"]

    def test_new_posts_sort_with_seeded_ones(self, kb):
        """Clock-stamped posts compare with seeded timestamps."""
        # Act
        qid = kb.add_question("New", "Body", ["react"], "alice")
        kb.add_answer("q-1", "Late answer", "bob")

        # Assert
        newest = kb.get_questions_by_filter(0, "newest", "")
        active = kb.get_questions_by_filter(0, "active", "")
        assert newest.questions[0].id == qid
        assert active.questions[0].id == "q-1"


class TestSeedLogging:
    """Tests for seed load reporting."""

    def test_seed_load_is_logged_once(self, tmp_path, monkeypatch, caplog):
        """Loading through the container reports the seed a single time."""
        # Arrange
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
        monkeypatch.setenv("SEED__PATH", str(path))
        container = build_test_container()

        # Act
        with caplog.at_level(logging.INFO, logger="askbase"):
            try:
                kb = container.get(KnowledgeBase)
            finally:
                container.close()

        # Assert
        assert len(kb.get_questions()) == 2
        seed_records = [r for r in caplog.records if "Seed loaded" in r.getMessage()]
        assert len(seed_records) == 1
