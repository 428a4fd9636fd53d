"""Pydantic schemas for the AI tutor API."""

from datetime import datetime

from pydantic import BaseModel, Field

from edustocks.domain.models import AnswerEvaluation, TutorAnswer, TutorQuestion


class QuestionRequest(BaseModel):
    level: str = Field(..., description="beginner, intermediate or advanced")
    topic: str


class GeneratedQuestionResponse(BaseModel):
    """Model-written question text in QUESTION/OPTIONS/ANSWER form."""

    question_id: str
    text: str
    level: str
    topic: str
    generated_at: datetime

    @classmethod
    def from_question(cls, question: TutorQuestion) -> "GeneratedQuestionResponse":
        return cls(
            question_id=question.question_id,
            text=question.text,
            level=question.level.value,
            topic=question.topic,
            generated_at=question.generated_at,
        )


class AnswerRequest(BaseModel):
    question_id: str
    answer: int = Field(..., description="Chosen option index, 0-3")


class AnswerEvaluationResponse(BaseModel):
    question_id: str
    user_answer: int
    correct: bool
    explanation: str
    evaluated_at: datetime

    @classmethod
    def from_evaluation(cls, evaluation: AnswerEvaluation) -> "AnswerEvaluationResponse":
        return cls(
            question_id=evaluation.question_id,
            user_answer=evaluation.answer,
            correct=evaluation.correct,
            explanation=evaluation.explanation,
            evaluated_at=evaluation.evaluated_at,
        )


class AskRequest(BaseModel):
    query: str
    level: str = "beginner"


class AskResponse(BaseModel):
    success: bool = True
    response: str
    level: str
    responded_at: datetime

    @classmethod
    def from_answer(cls, answer: TutorAnswer) -> "AskResponse":
        return cls(
            response=answer.response,
            level=answer.level.value,
            responded_at=answer.responded_at,
        )
