"""Auth API: verify the caller's token and initialize their records."""

from fastapi import APIRouter, Depends

from edustocks.api.deps import get_current_user, get_user_service
from edustocks.api.schemas import PortfolioResponse, ProgressResponse, VerifyResponse
from edustocks.auth import VerifiedUser
from edustocks.services import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/verify", response_model=VerifyResponse)
def verify(
    user: VerifiedUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Verify the bearer token and create progress and portfolio on first sign-in."""
    progress, portfolio = service.initialize_user(user.user_id)
    return VerifyResponse(
        user_id=user.user_id,
        email=user.email,
        progress=ProgressResponse.from_progress(progress),
        portfolio=PortfolioResponse.from_portfolio(portfolio),
    )
