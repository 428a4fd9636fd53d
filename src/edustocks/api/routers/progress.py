"""Learner progress API."""

from fastapi import APIRouter, Depends

from edustocks.api.deps import get_current_user, get_progress_tracker
from edustocks.api.schemas import ProgressResponse
from edustocks.auth import VerifiedUser
from edustocks.services import ProgressTracker

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=ProgressResponse)
def get_progress(
    user: VerifiedUser = Depends(get_current_user),
    tracker: ProgressTracker = Depends(get_progress_tracker),
):
    return ProgressResponse.from_progress(tracker.get_progress(user.user_id))
