"""Pydantic schemas for API request/response."""

from edustocks.api.schemas.common import ErrorResponse
from edustocks.api.schemas.quote import QuoteResponse, QuoteListResponse
from edustocks.api.schemas.portfolio import (
    HoldingResponse,
    PortfolioResponse,
    TradeRequest,
    TradeResponse,
)
from edustocks.api.schemas.progress import ProgressResponse
from edustocks.api.schemas.lesson import (
    QuestionResponse,
    LessonSummaryResponse,
    LessonResponse,
    LessonListResponse,
    LessonCompleteRequest,
)
from edustocks.api.schemas.auth import VerifyResponse
from edustocks.api.schemas.ai_trainer import (
    QuestionRequest,
    GeneratedQuestionResponse,
    AnswerRequest,
    AnswerEvaluationResponse,
    AskRequest,
    AskResponse,
)

__all__ = [
    "ErrorResponse",
    "QuoteResponse",
    "QuoteListResponse",
    "HoldingResponse",
    "PortfolioResponse",
    "TradeRequest",
    "TradeResponse",
    "ProgressResponse",
    "QuestionResponse",
    "LessonSummaryResponse",
    "LessonResponse",
    "LessonListResponse",
    "LessonCompleteRequest",
    "VerifyResponse",
    "QuestionRequest",
    "GeneratedQuestionResponse",
    "AnswerRequest",
    "AnswerEvaluationResponse",
    "AskRequest",
    "AskResponse",
]
