"""Request core shared by every endpoint function.

Builds the fully qualified URL for a relative endpoint path, performs the
GET through a :class:`~iexcloud.transport.Transport`, and decodes the JSON
body. Also provides the argument normalization helpers used by endpoint
modules.
"""

import json
import time
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any
from urllib.parse import urlencode

import structlog

from .errors import DecodeError, InvalidDateError, RequestError, TypeArgumentError
from .transport import DEFAULT_TIMEOUT, HttpxTransport, Transport

logger = structlog.get_logger(__name__)

DEFAULT_VERSION = "stable"

BASE_URL = "https://cloud.iexapis.com"

SANDBOX_URL = "https://sandbox.iexapis.com"

# Pseudo-version routing requests to the sandbox host.
SANDBOX_VERSION = "sandbox"

__all__ = [
    "BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_VERSION",
    "SANDBOX_URL",
    "SANDBOX_VERSION",
    "build_url",
    "get_json",
    "raise_if_not_str",
    "str_or_date",
    "str_to_list",
]


def build_url(
    url: str,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
) -> str:
    """Build the absolute request URL for an endpoint path.

    The relative ``url`` is kept verbatim (including any query string it
    already carries); the token and optional filter are appended as
    query parameters.

    Args:
        url: Endpoint path relative to the version root, e.g. ``"deep"``
            or ``"deep?symbols=AAPL"``.
        token: Access token.
        version: API version; empty means :data:`DEFAULT_VERSION`.
            ``"sandbox"`` routes to the sandbox host.
        filter: Comma separated list of response fields to keep.

    Returns:
        The absolute URL.
    """
    version = version or DEFAULT_VERSION
    if version == SANDBOX_VERSION:
        root = f"{SANDBOX_URL}/{DEFAULT_VERSION}"
    else:
        root = f"{BASE_URL}/{version}"

    params = {"token": token}
    if filter:
        params["filter"] = filter

    separator = "&" if "?" in url else "?"
    return f"{root}/{url}{separator}{urlencode(params, safe=',')}"


async def get_json(
    url: str,
    token: str = "",
    version: str = DEFAULT_VERSION,
    filter: str = "",
    *,
    transport: Transport | None = None,
) -> Any:
    """Fetch an endpoint and decode its JSON body.

    Args:
        url: Endpoint path relative to the version root.
        token: Access token.
        version: API version.
        filter: Optional response field filter.
        transport: Transport to use. When omitted a one-shot
            :class:`~iexcloud.transport.HttpxTransport` is opened for this
            call and closed afterwards.

    Returns:
        The decoded JSON value, unchanged.

    Raises:
        RequestError: If the response status is not 2xx.
        DecodeError: If the body is not valid JSON.
        httpx.HTTPError: If the default transport fails to complete the request.
    """
    if transport is None:
        async with HttpxTransport() as one_shot:
            return await get_json(url, token, version, filter, transport=one_shot)

    full_url = build_url(url, token, version, filter)
    start_time = time.monotonic()
    logger.debug(
        "Making API request",
        method="GET",
        endpoint=url,
        version=version or DEFAULT_VERSION,
        filter=filter or None,
    )
    response = await transport.get(full_url)

    if not 200 <= response.status < 300:  # noqa: PLR2004
        logger.error(
            "API request failed",
            endpoint=url,
            status=response.status,
        )
        raise RequestError(response.status, response.body)

    try:
        data = json.loads(response.body)
    except json.JSONDecodeError as exc:
        logger.error("API response is not valid JSON", endpoint=url)
        raise DecodeError(response.body) from exc

    logger.debug(
        "API request completed",
        endpoint=url,
        duration_seconds=round(time.monotonic() - start_time, 3),
    )
    return data


def raise_if_not_str(value: Any) -> None:
    """Reject anything other than a single symbol string.

    Empty values (``None``, ``""``, ``[]``) are allowed; endpoints treat
    them as "no symbol".

    Raises:
        TypeArgumentError: If ``value`` is truthy and not a ``str``.
    """
    if value and not isinstance(value, str):
        msg = (
            f"Cannot use type {type(value).__name__}, "
            "expected a single symbol string"
        )
        raise TypeArgumentError(msg)


def str_or_date(value: str | date) -> str:
    """Normalize a date argument to ``YYYYMMDD``.

    Accepts ``YYYYMMDD`` and ISO ``YYYY-MM-DD`` strings as well as
    ``datetime.date`` and ``datetime.datetime`` objects.

    Raises:
        InvalidDateError: If ``value`` cannot be interpreted as a date.
    """
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    if isinstance(value, str):
        for fmt in ("%Y%m%d", "%Y-%m-%d"):
            try:
                return datetime.strptime(value, fmt).strftime("%Y%m%d")  # noqa: DTZ007
            except ValueError:
                continue
    msg = f"Not a date: {value!r}"
    raise InvalidDateError(msg)


def str_to_list(value: str | Iterable[str]) -> list[str]:
    """Normalize one symbol or a sequence of symbols to a list.

    ``"AAPL"`` and ``["AAPL"]`` both give ``["AAPL"]``; sequences keep
    their order.

    Raises:
        TypeArgumentError: If a sequence element is not a string.
    """
    if isinstance(value, str):
        return [value]
    try:
        values = list(value)
    except TypeError as exc:
        msg = f"Cannot use type {type(value).__name__} as a symbol list"
        raise TypeArgumentError(msg) from exc
    for item in values:
        if not isinstance(item, str):
            msg = f"Cannot use type {type(item).__name__} as a symbol"
            raise TypeArgumentError(msg)
    return values
