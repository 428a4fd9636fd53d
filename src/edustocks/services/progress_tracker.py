"""Progress tracker: XP, level and rank earned from completed lessons."""

import logging
from typing import Optional

from edustocks.core.exceptions import UnauthenticatedError, ValidationError
from edustocks.core.locks import KeyedLock
from edustocks.core.timezone import now_eastern
from edustocks.domain.models import LessonLevel, Rank, UserProgress
from edustocks.repositories.protocols import RecordStore

logger = logging.getLogger(__name__)

# (minimum xp, value), highest threshold first
LEVEL_THRESHOLDS: tuple[tuple[int, LessonLevel], ...] = (
    (5000, LessonLevel.ADVANCED),
    (2000, LessonLevel.INTERMEDIATE),
    (0, LessonLevel.BEGINNER),
)

RANK_THRESHOLDS: tuple[tuple[int, Rank], ...] = (
    (5000, Rank.MASTER),
    (2500, Rank.EXPERT),
    (1000, Rank.ADVANCED),
    (500, Rank.INTERMEDIATE),
    (100, Rank.BEGINNER),
    (0, Rank.NOVICE),
)


def level_for_xp(xp: int) -> LessonLevel:
    for minimum, level in LEVEL_THRESHOLDS:
        if xp >= minimum:
            return level
    return LessonLevel.BEGINNER


def rank_for_xp(xp: int) -> Rank:
    for minimum, rank in RANK_THRESHOLDS:
        if xp >= minimum:
            return rank
    return Rank.NOVICE


def xp_for_score(score: float) -> int:
    """One XP per 10 percentage points of score, rounded down."""
    return int(score / 10)


class ProgressTracker:
    """Records lesson completions and keeps level and rank in step with XP."""

    def __init__(
        self,
        store: RecordStore[UserProgress],
        locks: Optional[KeyedLock] = None,
    ):
        self._store = store
        self._locks = locks or KeyedLock()

    def get_progress(self, user_id: str) -> UserProgress:
        """Get the user's progress, creating a default record on first access."""
        user_id = self._require_user(user_id)
        with self._locks.hold(user_id):
            return self._load_or_create(user_id)

    def complete_lesson(self, user_id: str, lesson_id: str, score: float) -> UserProgress:
        """
        Record a completed lesson and award XP.

        Completing the same lesson again changes nothing.
        """
        user_id = self._require_user(user_id)
        if not lesson_id or not lesson_id.strip():
            raise ValidationError("Lesson ID is required")
        if score is None or not 0 <= score <= 100:
            raise ValidationError("Score must be between 0 and 100")

        with self._locks.hold(user_id):
            progress = self._load_or_create(user_id)
            if progress.has_completed(lesson_id):
                return progress

            earned = xp_for_score(score)
            progress.completed_lessons.append(lesson_id)
            progress.xp += earned
            progress.level = level_for_xp(progress.xp)
            progress.rank = rank_for_xp(progress.xp)
            progress.updated_at_est = now_eastern()
            self._store.put(user_id, progress)

        logger.info(
            "User %s completed lesson %s (+%d XP, total %d, rank %s)",
            user_id, lesson_id, earned, progress.xp, progress.rank.value,
        )
        return progress

    def _load_or_create(self, user_id: str) -> UserProgress:
        progress = self._store.get(user_id)
        if progress is None:
            progress = UserProgress(user_id=user_id, updated_at_est=now_eastern())
            self._store.put(user_id, progress)
        return progress

    @staticmethod
    def _require_user(user_id: Optional[str]) -> str:
        if not user_id or not user_id.strip():
            raise UnauthenticatedError()
        return user_id
