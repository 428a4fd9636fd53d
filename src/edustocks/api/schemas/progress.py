"""Pydantic schemas for learner progress API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from edustocks.domain.models import UserProgress


class ProgressResponse(BaseModel):
    user_id: str
    level: str
    completed_lessons: list[str]
    xp: int
    rank: str
    updated_at_est: Optional[datetime] = None

    @classmethod
    def from_progress(cls, progress: UserProgress) -> "ProgressResponse":
        return cls(
            user_id=progress.user_id,
            level=progress.level.value,
            completed_lessons=list(progress.completed_lessons),
            xp=progress.xp,
            rank=progress.rank.value,
            updated_at_est=progress.updated_at_est,
        )
