"""Domain layer - pure business models with no external dependencies."""

from edustocks.domain.models import (
    TradeSide,
    LessonLevel,
    Rank,
    QuoteErrorKind,
    Holding,
    Portfolio,
    TradeResult,
    UserProgress,
    Lesson,
    Question,
    TutorQuestion,
    AnswerEvaluation,
    TutorAnswer,
)

__all__ = [
    "TradeSide",
    "LessonLevel",
    "Rank",
    "QuoteErrorKind",
    "Holding",
    "Portfolio",
    "TradeResult",
    "UserProgress",
    "Lesson",
    "Question",
    "TutorQuestion",
    "AnswerEvaluation",
    "TutorAnswer",
]
