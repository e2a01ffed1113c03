"""IEX market data endpoints."""

from .http import (
    auction,
    book,
    deep,
    hist,
    last,
    official_price,
    op_halt_status,
    security_event,
    ssr_status,
    system_event,
    tops,
    trade_break,
    trades,
    trading_status,
)

__all__ = [
    "auction",
    "book",
    "deep",
    "hist",
    "last",
    "official_price",
    "op_halt_status",
    "security_event",
    "ssr_status",
    "system_event",
    "tops",
    "trade_break",
    "trades",
    "trading_status",
]
