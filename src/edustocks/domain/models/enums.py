"""Enumerations for domain models."""

from enum import Enum


class TradeSide(str, Enum):
    """Direction of a simulated trade."""

    BUY = "BUY"
    SELL = "SELL"


class LessonLevel(str, Enum):
    """Difficulty levels shared by lessons and learner progress."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Rank(str, Enum):
    """Learner rank derived from accumulated XP."""

    NOVICE = "Novice"
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    MASTER = "Master"


class QuoteErrorKind(str, Enum):
    """Why a live quote could not be produced."""

    INVALID_SYMBOL = "INVALID_SYMBOL"
    UNKNOWN_SYMBOL = "UNKNOWN_SYMBOL"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    RATE_LIMITED = "RATE_LIMITED"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    UNAVAILABLE = "UNAVAILABLE"
