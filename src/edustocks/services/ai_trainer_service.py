"""AI tutor: generated quiz questions, answer checks and free-form questions."""

import logging
import uuid
from typing import Any

from edustocks.core.exceptions import ValidationError
from edustocks.core.timezone import now_eastern
from edustocks.domain.models import AnswerEvaluation, LessonLevel, TutorAnswer, TutorQuestion
from edustocks.providers.tutor_client import TutorClient

logger = logging.getLogger(__name__)

OPTION_COUNT = 4

QUESTION_PROMPT = (
    "Create a {level}-level multiple-choice question about {topic} stock trading. "
    "Format: QUESTION: [question text] "
    "OPTIONS: [A) option1 B) option2 C) option3 D) option4] "
    "ANSWER: [A/B/C/D]"
)
ANSWER_PROMPT = (
    "Evaluate if answer '{letter}' is correct for question ID {question_id}. "
    "Reply with exactly 'CORRECT' or 'INCORRECT' on first line, then explanation."
)
ASK_PROMPT = "As a {level}-level tutor, answer the following query:\n{query}"


def _parse_level(level: Any) -> LessonLevel:
    try:
        return LessonLevel(str(level or "").strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown level: {level}")


def _require_text(value: Any, field: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"{field} is required")
    return text


class AITrainerService:
    """
    Builds tutor prompts and interprets the model's replies.

    Nothing is stored: a question id only ties an answer check back to the
    question the caller was shown.
    """

    def __init__(self, client: TutorClient):
        self._client = client

    def generate_question(self, level: str, topic: str) -> TutorQuestion:
        """Ask the model for one multiple-choice question at `level` about `topic`."""
        parsed_level = _parse_level(level)
        topic = _require_text(topic, "Topic")

        text = self._client.generate(QUESTION_PROMPT.format(level=parsed_level.value, topic=topic))
        question = TutorQuestion(
            question_id=str(uuid.uuid4()),
            text=text,
            level=parsed_level,
            topic=topic,
            generated_at=now_eastern(),
        )
        logger.info("Generated %s question about %s", parsed_level.value, topic)
        return question

    def check_answer(self, question_id: str, answer: int) -> AnswerEvaluation:
        """
        Have the model judge option `answer` (0-3, shown to learners as A-D).

        The reply's first line decides correctness; the rest is the explanation.
        """
        question_id = _require_text(question_id, "Question id")
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise ValidationError(f"Answer must be an option index, got {answer!r}")
        if not 0 <= answer < OPTION_COUNT:
            raise ValidationError(f"Answer must be between 0 and {OPTION_COUNT - 1}, got {answer}")

        letter = chr(ord("A") + answer)
        evaluation = self._client.generate(ANSWER_PROMPT.format(letter=letter, question_id=question_id))

        first_line, newline, rest = evaluation.partition("\n")
        correct = first_line.strip().lower().startswith("correct")
        explanation = rest.strip() if newline and rest.strip() else evaluation.strip()
        return AnswerEvaluation(
            question_id=question_id,
            answer=answer,
            correct=correct,
            explanation=explanation,
            evaluated_at=now_eastern(),
        )

    def answer_query(self, query: str, level: str = LessonLevel.BEGINNER.value) -> TutorAnswer:
        """Answer a free-form learner question pitched at `level`."""
        query = _require_text(query, "Query")
        parsed_level = _parse_level(level or LessonLevel.BEGINNER.value)

        response = self._client.generate(ASK_PROMPT.format(level=parsed_level.value, query=query))
        return TutorAnswer(response=response, level=parsed_level, responded_at=now_eastern())
