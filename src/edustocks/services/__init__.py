"""Service layer - business logic orchestration."""

from edustocks.services.quote_cache import QuoteCache, normalize_symbol
from edustocks.services.portfolio_ledger import PortfolioLedger
from edustocks.services.progress_tracker import ProgressTracker
from edustocks.services.lesson_service import LessonService
from edustocks.services.user_service import UserService
from edustocks.services.ai_trainer_service import AITrainerService

__all__ = [
    "QuoteCache",
    "normalize_symbol",
    "PortfolioLedger",
    "ProgressTracker",
    "LessonService",
    "UserService",
    "AITrainerService",
]
