"""Pydantic schemas for auth API."""

from typing import Optional

from pydantic import BaseModel

from edustocks.api.schemas.portfolio import PortfolioResponse
from edustocks.api.schemas.progress import ProgressResponse


class VerifyResponse(BaseModel):
    """Identity of the caller plus their initialized records."""

    user_id: str
    email: Optional[str] = None
    progress: ProgressResponse
    portfolio: PortfolioResponse
