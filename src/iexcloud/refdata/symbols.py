"""Reference data symbol endpoints and symbol-list helpers.

The ``*_list`` helpers request only the ``symbol`` field and flatten the
response to a list of ticker strings.

https://iexcloud.io/docs/api/#reference-data
"""

from collections.abc import Awaitable, Mapping
from typing import Any

from ..common import DEFAULT_VERSION, get_json
from ..transport import Transport

SYMBOL_FILTER = "symbol"


async def symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Symbols IEX Cloud supports for API calls.

    https://iexcloud.io/docs/api/#symbols

    Args:
        token: Access token.
        version: API version.
        filter: Response field filter.
        transport: Transport to use for the request.
    """
    return await get_json(
        "ref-data/symbols", token, version, filter, transport=transport
    )


async def iex_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Symbols the Investors Exchange supports for trading.

    https://iexcloud.io/docs/api/#iex-symbols
    """
    return await get_json(
        "ref-data/iex/symbols", token, version, filter, transport=transport
    )


async def mutual_fund_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Mutual fund symbols IEX Cloud supports for API calls.

    https://iexcloud.io/docs/api/#mutual-fund-symbols
    """
    return await get_json(
        "ref-data/mutual-funds/symbols", token, version, filter, transport=transport
    )


async def otc_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """OTC symbols IEX Cloud supports for API calls.

    https://iexcloud.io/docs/api/#otc-symbols
    """
    return await get_json(
        "ref-data/otc/symbols", token, version, filter, transport=transport
    )


async def international_symbols(
    region: str | None = None,
    exchange: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """International symbols IEX Cloud supports for API calls.

    ``region`` takes precedence over ``exchange``; with neither, US
    symbols are returned.

    https://iexcloud.io/docs/api/#international-symbols

    Args:
        region: Two letter, case insensitive ISO 3166-1 alpha-2 country code.
        exchange: Case insensitive exchange code from the IEX supported
            exchanges list.
        token: Access token.
        version: API version.
        filter: Response field filter.
        transport: Transport to use for the request.
    """
    if region:
        url = f"ref-data/region/{region}/symbols"
    elif exchange:
        url = f"ref-data/exchange/{exchange}/symbols"
    else:
        url = "ref-data/region/us/symbols"
    return await get_json(url, token, version, filter, transport=transport)


async def fx_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Supported currencies and currency pairs.

    https://iexcloud.io/docs/api/#fx-symbols
    """
    return await get_json(
        "ref-data/fx/symbols", token, version, filter, transport=transport
    )


async def options_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Symbols keyed to their available option contract dates.

    https://iexcloud.io/docs/api/#options-symbols
    """
    return await get_json(
        "ref-data/options/symbols", token, version, filter, transport=transport
    )


async def crypto_symbols(
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Cryptocurrencies supported by IEX Cloud.

    https://iexcloud.io/docs/api/#cryptocurrency-symbols
    """
    return await get_json(
        "ref-data/crypto/symbols", token, version, filter, transport=transport
    )


async def isin_lookup(
    isin: str,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Symbols listed under an ISIN.

    https://iexcloud.io/docs/api/#isin-mapping
    """
    return await get_json(
        f"ref-data/isin?isin={isin}", token, version, filter, transport=transport
    )


async def _convert_to_list(response: Awaitable[Any]) -> list[str]:
    return [record["symbol"] for record in await response]


async def symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all symbols IEX Cloud supports."""
    return await _convert_to_list(
        symbols(token, version, SYMBOL_FILTER, transport=transport)
    )


async def iex_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all symbols traded on IEX."""
    return await _convert_to_list(
        iex_symbols(token, version, SYMBOL_FILTER, transport=transport)
    )


async def mutual_fund_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all supported mutual funds."""
    return await _convert_to_list(
        mutual_fund_symbols(token, version, SYMBOL_FILTER, transport=transport)
    )


async def otc_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all supported OTC symbols."""
    return await _convert_to_list(
        otc_symbols(token, version, SYMBOL_FILTER, transport=transport)
    )


async def international_symbols_list(
    region: str | None = None,
    exchange: str | None = None,
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of international symbols for a region or exchange."""
    return await _convert_to_list(
        international_symbols(
            region, exchange, token, version, SYMBOL_FILTER, transport=transport
        )
    )


async def fx_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[list[str]]:
    """Currency codes and currency pair codes.

    Returns:
        ``[currencies, pairs]`` where ``currencies`` holds codes such as
        ``"USD"`` and ``pairs`` holds concatenated codes such as ``"USDJPY"``.
    """
    fx = await fx_symbols(token, version, transport=transport)
    currencies = [record["code"] for record in fx["currencies"]]
    pairs = [record["fromCurrency"] + record["toCurrency"] for record in fx["pairs"]]
    return [currencies, pairs]


async def options_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all symbols with listed options.

    The endpoint answers with an object keyed by symbol; a list of records
    is also accepted.
    """
    response = await options_symbols(
        token, version, SYMBOL_FILTER, transport=transport
    )
    if isinstance(response, Mapping):
        return list(response)
    return [record["symbol"] for record in response]


async def crypto_symbols_list(
    token: str = "",
    version: str = DEFAULT_VERSION,
    *,
    transport: Transport | None = None,
) -> list[str]:
    """Tickers of all supported cryptocurrencies."""
    return await _convert_to_list(
        crypto_symbols(token, version, SYMBOL_FILTER, transport=transport)
    )
