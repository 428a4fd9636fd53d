"""Lesson and Question domain models."""

from dataclasses import dataclass, field

from edustocks.domain.models.enums import LessonLevel


@dataclass(frozen=True)
class Question:
    """Multiple-choice question attached to a lesson."""

    id: str
    prompt: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str = ""


@dataclass(frozen=True)
class Lesson:
    """Static lesson content. Read-only."""

    id: str
    title: str
    description: str
    level: LessonLevel
    content: str
    order: int
    questions: tuple[Question, ...] = field(default_factory=tuple)
