"""Lesson catalog service."""

from typing import Iterable, Optional

from edustocks.content.lessons import LESSONS
from edustocks.core.exceptions import NotFoundError, ValidationError
from edustocks.domain.models import Lesson, LessonLevel, UserProgress
from edustocks.services.progress_tracker import ProgressTracker


class LessonService:
    """Serves read-only lessons and forwards completions to the progress tracker."""

    def __init__(
        self,
        progress_tracker: ProgressTracker,
        lessons: Iterable[Lesson] = LESSONS,
    ):
        self._progress = progress_tracker
        self._lessons = sorted(lessons, key=lambda lesson: lesson.order)
        self._by_id = {lesson.id: lesson for lesson in self._lessons}

    def list_lessons(self, level: Optional[str] = None) -> list[Lesson]:
        """List lessons in order, optionally filtered by level (case-insensitive)."""
        if not level:
            return list(self._lessons)
        try:
            wanted = LessonLevel(level.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown lesson level: {level}")
        return [lesson for lesson in self._lessons if lesson.level == wanted]

    def get_lesson(self, lesson_id: str) -> Lesson:
        """Get lesson by ID."""
        lesson = self._by_id.get(lesson_id)
        if lesson is None:
            raise NotFoundError("Lesson", lesson_id)
        return lesson

    def complete_lesson(self, user_id: str, lesson_id: str, score: float) -> UserProgress:
        """Mark a lesson complete for the user and award XP for the score."""
        self.get_lesson(lesson_id)
        return self._progress.complete_lesson(user_id, lesson_id, score)
