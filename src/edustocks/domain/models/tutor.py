"""AI tutor exchange models."""

from dataclasses import dataclass
from datetime import datetime

from edustocks.domain.models.enums import LessonLevel


@dataclass(frozen=True)
class TutorQuestion:
    """Generated multiple-choice question; `text` holds the raw model output."""

    question_id: str
    text: str
    level: LessonLevel
    topic: str
    generated_at: datetime


@dataclass(frozen=True)
class AnswerEvaluation:
    question_id: str
    answer: int
    correct: bool
    explanation: str
    evaluated_at: datetime


@dataclass(frozen=True)
class TutorAnswer:
    """Reply to a free-form question."""

    response: str
    level: LessonLevel
    responded_at: datetime
