"""Lesson API: catalog browsing and completion."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from edustocks.api.deps import get_current_user, get_lesson_service
from edustocks.api.schemas import (
    LessonCompleteRequest,
    LessonListResponse,
    LessonResponse,
    LessonSummaryResponse,
    ProgressResponse,
)
from edustocks.auth import VerifiedUser
from edustocks.services import LessonService

router = APIRouter(prefix="/api/lessons", tags=["lessons"])


@router.get("", response_model=LessonListResponse)
def list_lessons(
    level: Optional[str] = Query(None, description="beginner, intermediate or advanced"),
    user: VerifiedUser = Depends(get_current_user),
    service: LessonService = Depends(get_lesson_service),
):
    items = [LessonSummaryResponse.from_lesson(lesson) for lesson in service.list_lessons(level)]
    return LessonListResponse(items=items, total=len(items))


@router.get("/{lesson_id}", response_model=LessonResponse)
def get_lesson(
    lesson_id: str,
    user: VerifiedUser = Depends(get_current_user),
    service: LessonService = Depends(get_lesson_service),
):
    return LessonResponse.from_lesson(service.get_lesson(lesson_id))


@router.post("/{lesson_id}/complete", response_model=ProgressResponse)
def complete_lesson(
    lesson_id: str,
    data: LessonCompleteRequest,
    user: VerifiedUser = Depends(get_current_user),
    service: LessonService = Depends(get_lesson_service),
):
    """Record the quiz score; completing a lesson twice awards nothing."""
    progress = service.complete_lesson(user.user_id, lesson_id, data.score)
    return ProgressResponse.from_progress(progress)
