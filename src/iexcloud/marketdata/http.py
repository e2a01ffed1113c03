"""IEX market data (TOPS, Last, DEEP and HIST) endpoints.

Endpoints accepting a single symbol reject sequences up front. The remote
side ignores ``filter`` on symbol requests to ``tops``, ``last`` and
``deep``, so for those it is only sent with the whole-market form.

https://iexcloud.io/docs/api/#iex-market-data
"""

import datetime
from collections.abc import Iterable
from typing import Any

from ..common import (
    DEFAULT_VERSION,
    get_json,
    raise_if_not_str,
    str_or_date,
    str_to_list,
)
from ..transport import Transport


def _batch_symbols(symbol_list: list[str]) -> str:
    # The API expects a literal "+" (encoded) after the symbol list.
    return ",".join(symbol_list) + "%2b"


async def tops(
    symbols: str | Iterable[str] | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Aggregated best quoted bid and offer position on IEX.

    https://iexcloud.io/docs/api/#tops

    Args:
        symbols: One symbol or a sequence of symbols; all symbols if empty.
        token: Access token.
        version: API version.
        filter: Response field filter, ignored when symbols are given.
        transport: Transport to use for the request.
    """
    symbol_list = str_to_list(symbols) if symbols else []
    if symbol_list:
        return await get_json(
            f"tops?symbols={_batch_symbols(symbol_list)}",
            token,
            version,
            transport=transport,
        )
    return await get_json("tops", token, version, filter, transport=transport)


async def last(
    symbols: str | Iterable[str] | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Last sale price, size and time for executions on IEX.

    https://iexcloud.io/docs/api/#last

    Args:
        symbols: One symbol or a sequence of symbols; all symbols if empty.
        token: Access token.
        version: API version.
        filter: Response field filter, ignored when symbols are given.
        transport: Transport to use for the request.
    """
    symbol_list = str_to_list(symbols) if symbols else []
    if symbol_list:
        return await get_json(
            f"last?symbols={_batch_symbols(symbol_list)}",
            token,
            version,
            transport=transport,
        )
    return await get_json("last", token, version, filter, transport=transport)


async def deep(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Real-time depth of book quotations direct from IEX.

    https://iexcloud.io/docs/api/#deep

    Args:
        symbol: A single symbol; the whole feed if empty.
        token: Access token.
        version: API version.
        filter: Response field filter, ignored when a symbol is given.
        transport: Transport to use for the request.

    Raises:
        TypeArgumentError: If ``symbol`` is not a single string.
    """
    raise_if_not_str(symbol)
    if symbol:
        return await get_json(
            f"deep?symbols={symbol}",
            token,
            version,
            transport=transport,
        )
    return await get_json("deep", token, version, filter, transport=transport)


async def _deep_endpoint(
    path: str,
    symbol: str | None,
    token: str,
    version: str,
    filter: str,
    transport: Transport | None,
) -> Any:
    raise_if_not_str(symbol)
    if symbol:
        return await get_json(
            f"deep/{path}?symbols={symbol}",
            token,
            version,
            filter,
            transport=transport,
        )
    return await get_json(f"deep/{path}", token, version, filter, transport=transport)


async def auction(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Auction information for opening, closing, IPO, halt and volatility auctions.

    https://iexcloud.io/docs/api/#deep-auction
    """
    return await _deep_endpoint("auction", symbol, token, version, filter, transport)


async def book(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """IEX bids and asks for a symbol.

    https://iexcloud.io/docs/api/#deep-book
    """
    return await _deep_endpoint("book", symbol, token, version, filter, transport)


async def op_halt_status(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Operational halt status of a security on IEX.

    https://iexcloud.io/docs/api/#deep-operational-halt-status
    """
    return await _deep_endpoint(
        "op-halt-status", symbol, token, version, filter, transport
    )


async def official_price(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """IEX Official Opening and Closing Prices for IEX listed securities.

    https://iexcloud.io/docs/api/#deep-official-price
    """
    return await _deep_endpoint(
        "official-price", symbol, token, version, filter, transport
    )


async def security_event(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Events that apply to a security, such as market open and close.

    https://iexcloud.io/docs/api/#deep-security-event
    """
    return await _deep_endpoint(
        "security-event", symbol, token, version, filter, transport
    )


async def ssr_status(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Short sale price test (Reg SHO Rule 201) restriction status.

    https://iexcloud.io/docs/api/#deep-short-sale-price-test-status
    """
    return await _deep_endpoint("ssr-status", symbol, token, version, filter, transport)


async def system_event(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Events that apply to the market or the data feed.

    https://iexcloud.io/docs/api/#deep-system-event
    """
    return await _deep_endpoint(
        "system-event", symbol, token, version, filter, transport
    )


async def trades(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Trade reports for every individual fill on the IEX order book.

    https://iexcloud.io/docs/api/#deep-trades
    """
    return await _deep_endpoint("trades", symbol, token, version, filter, transport)


async def trade_break(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Executions on IEX broken on the same trading day.

    https://iexcloud.io/docs/api/#deep-trade-break
    """
    return await _deep_endpoint(
        "trade-breaks", symbol, token, version, filter, transport
    )


async def trading_status(
    symbol: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Current trading status of a security (halted, paused, trading).

    https://iexcloud.io/docs/api/#deep-trading-status
    """
    return await _deep_endpoint(
        "trading-status", symbol, token, version, filter, transport
    )


async def hist(
    date: str | datetime.date | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Historical IEX data files, for one day or all available days.

    Args:
        date: Day to fetch, as ``YYYYMMDD``, ``YYYY-MM-DD`` or a date.
        token: Access token.
        version: API version.
        filter: Response field filter.
        transport: Transport to use for the request.

    Raises:
        InvalidDateError: If ``date`` cannot be interpreted as a date.
    """
    if date:
        return await get_json(
            f"hist?date={str_or_date(date)}",
            token,
            version,
            filter,
            transport=transport,
        )
    return await get_json("hist", token, version, filter, transport=transport)
