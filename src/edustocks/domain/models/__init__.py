"""Domain models package."""

from edustocks.domain.models.enums import TradeSide, LessonLevel, Rank, QuoteErrorKind
from edustocks.domain.models.portfolio import Holding, Portfolio, TradeResult
from edustocks.domain.models.progress import UserProgress
from edustocks.domain.models.lesson import Lesson, Question
from edustocks.domain.models.tutor import TutorQuestion, AnswerEvaluation, TutorAnswer

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
