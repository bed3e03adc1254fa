"""Answer domain service."""

import logfire

from askbase.domain.model.answer import Answer
from askbase.domain.model.question import Question
from askbase.domain.repository.answer import AnswerRepository
from askbase.domain.repository.question import QuestionRepository
from askbase.domain.value import QuestionId
from askbase.util.clock import Clock

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations.

    Keeps a question's answer_ids and last_answer_at in step with the
    answers stored for it.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        clock: Clock,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            clock: Source of posted_at timestamps
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.clock = clock

    def add_answer(
        self, question_id: QuestionId, text: str, authored_by: str
    ) -> Answer | None:
        """Post an answer to an existing question.

        Unknown questions are a silent no-op.

        Args:
            question_id: Question being answered
            text: Answer body
            authored_by: Author username

        Returns:
            The saved answer, or None if the question doesn't exist
        """
        with logfire.span("answer_service.add_answer", question_id=question_id):
            question = self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found for answer", question_id=question_id)
                return None

            answer = self.answer_repository.save(
                Answer(
                    id=self.answer_repository.next_id(),
                    text=text,
                    authored_by=authored_by,
                    posted_at=self.clock.now(),
                )
            )
            updated = self.question_repository.save(question.with_answer(answer))
            logfire.info(
                "Answer added",
                question_id=question_id,
                answer_id=answer.id,
                answer_count=updated.answer_count,
            )
            return answer

    def get_answers_for(self, question: Question | None) -> list[Answer]:
        """Get a question's answers, newest first.

        Args:
            question: The question (None yields no answers)

        Returns:
            Answers sorted by posted_at descending
        """
        if question is None:
            return []
        answers = self.answer_repository.find_by_ids(question.answer_ids)
        answers.sort(key=lambda a: a.posted_at, reverse=True)
        return answers

    def get_all_answers(self) -> list[Answer]:
        """Get every answer in creation order."""
        return self.answer_repository.find_all()
