"""Stock quote API."""

from fastapi import APIRouter, Depends, Query

from edustocks.api.deps import get_current_user, get_quote_cache
from edustocks.api.schemas import QuoteListResponse, QuoteResponse
from edustocks.auth import VerifiedUser
from edustocks.services import QuoteCache

router = APIRouter(prefix="/api/stocks", tags=["stocks"])


@router.get("", response_model=QuoteListResponse)
def list_quotes(
    user: VerifiedUser = Depends(get_current_user),
    quote_cache: QuoteCache = Depends(get_quote_cache),
):
    """Quotes for every watch-list symbol that has one."""
    items = [QuoteResponse.from_quote(q) for q in quote_cache.get_all_quotes()]
    return QuoteListResponse(items=items, total=len(items))


# Declared before /{symbol} so "search" is not taken as a symbol
@router.get("/search", response_model=QuoteListResponse)
def search_quotes(
    query: str = Query("", description="Substring of symbol or company name"),
    user: VerifiedUser = Depends(get_current_user),
    quote_cache: QuoteCache = Depends(get_quote_cache),
):
    items = [QuoteResponse.from_quote(q) for q in quote_cache.search_quotes(query)]
    return QuoteListResponse(items=items, total=len(items))


@router.get("/{symbol}", response_model=QuoteResponse)
def get_quote(
    symbol: str,
    user: VerifiedUser = Depends(get_current_user),
    quote_cache: QuoteCache = Depends(get_quote_cache),
):
    return QuoteResponse.from_quote(quote_cache.get_quote(symbol))
