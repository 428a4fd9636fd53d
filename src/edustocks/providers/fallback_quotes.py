"""Built-in approximate quotes for the watch list, used when live data fails."""

from decimal import Decimal

from edustocks.domain.views import Quote

# Symbols listed by GET /api/stocks, in display order.
WATCHLIST: tuple[str, ...] = (
    "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA",
    "META", "NVDA", "JPM", "V", "JNJ",
)

# symbol -> (display name, price, change, change %, volume, exchange)
_FALLBACK_DATA: dict[str, tuple[str, str, str, str, int, str]] = {
    "AAPL": ("Apple Inc.", "185.50", "1.25", "0.68", 52_000_000, "NASDAQ"),
    "MSFT": ("Microsoft Corporation", "378.25", "1.45", "0.38", 21_000_000, "NASDAQ"),
    "GOOGL": ("Alphabet Inc.", "142.75", "1.25", "0.88", 25_000_000, "NASDAQ"),
    "AMZN": ("Amazon.com Inc.", "178.50", "1.25", "0.71", 40_000_000, "NASDAQ"),
    "TSLA": ("Tesla Inc.", "248.75", "-1.35", "-0.54", 98_000_000, "NASDAQ"),
    "META": ("Meta Platforms Inc.", "505.50", "2.75", "0.55", 15_000_000, "NASDAQ"),
    "NVDA": ("NVIDIA Corporation", "485.25", "2.75", "0.57", 45_000_000, "NASDAQ"),
    "JPM": ("JPMorgan Chase & Co.", "198.40", "-0.85", "-0.43", 9_000_000, "NYSE"),
    "V": ("Visa Inc.", "276.10", "0.90", "0.33", 6_000_000, "NYSE"),
    "JNJ": ("Johnson & Johnson", "156.30", "-0.40", "-0.26", 7_000_000, "NYSE"),
}

FALLBACK_QUOTES: dict[str, Quote] = {
    symbol: Quote(
        symbol=symbol,
        display_name=name,
        price=Decimal(price),
        change=Decimal(change),
        change_percent=Decimal(change_pct),
        volume=volume,
        exchange=exchange,
    )
    for symbol, (name, price, change, change_pct, volume, exchange) in _FALLBACK_DATA.items()
}
