"""Initial data for the knowledge base.

A seed payload is supplied once, when the knowledge base is built. It is
validated as a whole so the stores start out referentially consistent:

    {
      "tags": [{"id": "tag-1", "name": "react"}],
      "answers": [{"id": "ans-1", "text": "...", "authored_by": "hamkalo",
                   "posted_at": "2023-11-20T03:24:42"}],
      "questions": [{"id": "q-1", "title": "...", "text": "...",
                     "tag_ids": ["tag-1"], "authored_by": "JoJi John",
                     "asked_at": "2022-01-20T03:00:00",
                     "answer_ids": ["ans-1"], "view_count": 10}]
    }
"""

from collections import Counter
from datetime import datetime
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from askbase.domain.model.answer import Answer
from askbase.domain.model.question import Question
from askbase.domain.model.tag import Tag
from askbase.domain.value import AnswerId, QuestionId, TagId
from askbase.util.clock import naive_local
from askbase.util.error import ConfigurationError
from askbase.util.logging import get_logger

logger = get_logger(__name__)


class SeedQuestion(BaseModel):
    """Question as supplied in a seed payload.

    last_answer_at is not accepted; it is derived from the answers.
    """

    id: QuestionId
    title: str
    text: str
    tag_ids: list[TagId] = []
    authored_by: str
    asked_at: datetime
    answer_ids: list[AnswerId] = []
    view_count: int = Field(default=0, ge=0)

    @field_validator("asked_at")
    @classmethod
    def normalize_asked_at(cls, v: datetime) -> datetime:
        """Payloads may carry UTC timestamps; clocks are naive local."""
        return naive_local(v)


def _duplicates(ids: list[str]) -> list[str]:
    return sorted(i for i, n in Counter(ids).items() if n > 1)


class SeedData(BaseModel):
    """Construction payload: initial tags, answers and questions."""

    tags: list[Tag] = []
    answers: list[Answer] = []
    questions: list[SeedQuestion] = []

    @model_validator(mode="after")
    def validate_references(self) -> "SeedData":
        """Check ids are unique and every reference resolves."""
        for kind, ids in (
            ("tag", [t.id for t in self.tags]),
            ("answer", [a.id for a in self.answers]),
            ("question", [q.id for q in self.questions]),
        ):
            duplicates = _duplicates(ids)
            if duplicates:
                raise ValueError(f"Duplicate {kind} ids: {', '.join(duplicates)}")

        tag_ids = {t.id for t in self.tags}
        answer_ids = {a.id for a in self.answers}
        for question in self.questions:
            missing_tags = [t for t in question.tag_ids if t not in tag_ids]
            if missing_tags:
                raise ValueError(
                    f"Question {question.id} references unknown tags: "
                    f"{', '.join(missing_tags)}"
                )
            missing_answers = [a for a in question.answer_ids if a not in answer_ids]
            if missing_answers:
                raise ValueError(
                    f"Question {question.id} references unknown answers: "
                    f"{', '.join(missing_answers)}"
                )

        shared = _duplicates([a for q in self.questions for a in set(q.answer_ids)])
        if shared:
            raise ValueError(
                f"Answers referenced by more than one question: {', '.join(shared)}"
            )
        return self

    def build_questions(self) -> list[Question]:
        """Create Question entities with last_answer_at filled in."""
        posted_at = {a.id: a.posted_at for a in self.answers}
        questions = []
        for seed in self.questions:
            answer_ids = tuple(dict.fromkeys(seed.answer_ids))
            questions.append(
                Question(
                    id=seed.id,
                    title=seed.title,
                    text=seed.text,
                    tag_ids=tuple(seed.tag_ids),
                    authored_by=seed.authored_by,
                    asked_at=seed.asked_at,
                    answer_ids=answer_ids,
                    view_count=seed.view_count,
                    last_answer_at=max(
                        (posted_at[a] for a in answer_ids), default=None
                    ),
                )
            )
        return questions


def load_seed(path: Path) -> SeedData:
    """Load a seed payload from a JSON file.

    Args:
        path: JSON file path

    Returns:
        Validated seed data

    Raises:
        ConfigurationError: If the file can't be read or isn't a valid payload
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read seed file {path}: {e}") from e

    try:
        seed = SeedData.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid seed file {path}: {e}") from e

    logger.info(
        f"Seed loaded from {path}: {len(seed.questions)} questions, "
        f"{len(seed.answers)} answers, {len(seed.tags)} tags"
    )
    return seed
