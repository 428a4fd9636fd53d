"""Learner progress domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from edustocks.domain.models.enums import LessonLevel, Rank


@dataclass
class UserProgress:
    """
    XP, level and rank earned by completing lessons.

    `completed_lessons` keeps completion order and never holds duplicates.
    """

    user_id: str
    level: LessonLevel = LessonLevel.BEGINNER
    completed_lessons: list[str] = field(default_factory=list)
    xp: int = 0
    rank: Rank = Rank.NOVICE
    updated_at_est: Optional[datetime] = None

    def __post_init__(self) -> None:
        if isinstance(self.level, str):
            self.level = LessonLevel(self.level)
        if isinstance(self.rank, str):
            self.rank = Rank(self.rank)

    def has_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lessons
