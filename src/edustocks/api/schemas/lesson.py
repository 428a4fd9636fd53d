"""Pydantic schemas for lesson API."""

from pydantic import BaseModel, Field

from edustocks.domain.models import Lesson, Question


class QuestionResponse(BaseModel):
    id: str
    question: str
    options: list[str]
    correct_answer: int
    explanation: str = ""

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            question=question.prompt,
            options=list(question.options),
            correct_answer=question.correct_index,
            explanation=question.explanation,
        )


class LessonSummaryResponse(BaseModel):
    """Lesson without its body, for listings."""

    id: str
    title: str
    description: str
    level: str
    order: int

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> "LessonSummaryResponse":
        return cls(
            id=lesson.id,
            title=lesson.title,
            description=lesson.description,
            level=lesson.level.value,
            order=lesson.order,
        )


class LessonResponse(LessonSummaryResponse):
    """Full lesson with content and quiz questions."""

    content: str
    questions: list[QuestionResponse]

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> "LessonResponse":
        return cls(
            id=lesson.id,
            title=lesson.title,
            description=lesson.description,
            level=lesson.level.value,
            order=lesson.order,
            content=lesson.content,
            questions=[QuestionResponse.from_question(q) for q in lesson.questions],
        )


class LessonListResponse(BaseModel):
    items: list[LessonSummaryResponse]
    total: int


class LessonCompleteRequest(BaseModel):
    """Quiz score as a percentage."""

    score: float = Field(..., description="Score between 0 and 100")
