"""Tests for the request core and argument normalization helpers."""

import datetime

import pytest

from iexcloud import common, errors

# ---------------------------------------------------------------------------
# build_url
# ---------------------------------------------------------------------------


def test_build_url_appends_token():
    """Token is added as the first query parameter of a bare path."""
    actual_url = common.build_url("deep", token="pk_test", version="stable")
    assert actual_url == "https://cloud.iexapis.com/stable/deep?token=pk_test"


def test_build_url_appends_token_to_existing_query():
    """Paths that already carry a query string get '&token='."""
    actual_url = common.build_url(
        "deep?symbols=AAPL", token="pk_test", version="stable"
    )
    assert actual_url == (
        "https://cloud.iexapis.com/stable/deep?symbols=AAPL&token=pk_test"
    )


def test_build_url_adds_filter_with_literal_commas():
    """The filter is appended after the token and commas stay unescaped."""
    actual_url = common.build_url(
        "tops", token="t", version="stable", filter="symbol,name"
    )
    assert actual_url.endswith("tops?token=t&filter=symbol,name")


def test_build_url_omits_empty_filter():
    """No filter parameter is sent when the filter is empty."""
    actual_url = common.build_url("tops", token="t", filter="")
    assert "filter" not in actual_url


def test_build_url_empty_version_uses_default():
    """An empty version falls back to DEFAULT_VERSION."""
    actual_url = common.build_url("tops", token="t", version="")
    assert actual_url.startswith(f"{common.BASE_URL}/{common.DEFAULT_VERSION}/tops")


def test_build_url_sandbox_version_routes_to_sandbox_host():
    """The 'sandbox' pseudo-version targets the sandbox host's stable API."""
    actual_url = common.build_url("tops", token="Tpk_x", version="sandbox")
    assert actual_url == "https://sandbox.iexapis.com/stable/tops?token=Tpk_x"


def test_build_url_keeps_batch_suffix_verbatim():
    """The encoded '+' suffix of batch symbol lists is not re-encoded."""
    actual_url = common.build_url("tops?symbols=AAPL,MSFT%2b", token="t")
    assert "tops?symbols=AAPL,MSFT%2b&token=t" in actual_url


def test_build_url_encodes_token():
    """Reserved characters in the token are query-string encoded."""
    actual_url = common.build_url("tops", token="a&b")
    assert actual_url.endswith("?token=a%26b")


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_json_returns_decoded_body(transport):
    """A 2xx response body is decoded and returned unchanged."""
    expected = [{"symbol": "AAPL", "price": 123.4}]
    transport.respond(expected)

    actual = await common.get_json("tops", "t", "stable", transport=transport)

    assert actual == expected


@pytest.mark.asyncio
async def test_get_json_requests_built_url(transport):
    """The transport receives exactly the URL produced by build_url."""
    await common.get_json("deep", "t", "beta", "symbol", transport=transport)

    assert transport.urls == [common.build_url("deep", "t", "beta", "symbol")]


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 401, 404, 429, 500, 503])
async def test_get_json_non_2xx_raises_request_error(transport, status):
    """Non-success statuses raise RequestError carrying status and body."""
    transport.respond_raw("Unknown symbol", status=status)

    with pytest.raises(errors.RequestError) as exc_info:
        await common.get_json("deep?symbols=ZZZZ", "t", transport=transport)

    assert exc_info.value.status == status
    assert exc_info.value.body == "Unknown symbol"


@pytest.mark.asyncio
async def test_get_json_accepts_any_2xx(transport):
    """Every status in the 2xx range counts as success."""
    transport.respond({"ok": True}, status=204)

    actual = await common.get_json("tops", "t", transport=transport)

    assert actual == {"ok": True}


@pytest.mark.asyncio
async def test_get_json_invalid_body_raises_decode_error(transport):
    """A successful response whose body is not JSON raises DecodeError."""
    transport.respond_raw("<html>gateway</html>")

    with pytest.raises(errors.DecodeError) as exc_info:
        await common.get_json("tops", "t", transport=transport)

    assert exc_info.value.body == "<html>gateway</html>"


@pytest.mark.asyncio
async def test_get_json_does_not_retry(transport):
    """Failures are surfaced after a single request."""
    transport.respond_raw("busy", status=503)

    with pytest.raises(errors.RequestError):
        await common.get_json("tops", "t", transport=transport)

    assert len(transport.urls) == 1


# ---------------------------------------------------------------------------
# raise_if_not_str
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", ["AAPL", "", None, []])
def test_raise_if_not_str_accepts_strings_and_empty(value):
    """Strings and empty values pass through without raising."""
    common.raise_if_not_str(value)


@pytest.mark.parametrize("value", [["AAPL"], ("AAPL", "MSFT"), {"AAPL"}, 1])
def test_raise_if_not_str_rejects_non_strings(value):
    """Non-empty non-strings raise TypeArgumentError."""
    with pytest.raises(errors.TypeArgumentError):
        common.raise_if_not_str(value)


def test_type_argument_error_is_a_type_error():
    """TypeArgumentError can be caught as the builtin TypeError."""
    with pytest.raises(TypeError):
        common.raise_if_not_str(["AAPL"])


# ---------------------------------------------------------------------------
# str_or_date
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("20210102", "20210102"),
        ("2021-01-02", "20210102"),
        (datetime.date(2021, 1, 2), "20210102"),
        (datetime.datetime(2021, 1, 2, 15, 30), "20210102"),
    ],
)
def test_str_or_date_normalizes(value, expected):
    """Accepted date forms are normalized to YYYYMMDD."""
    assert common.str_or_date(value) == expected


@pytest.mark.parametrize("value", ["yesterday", "2021-13-01", "202101", 20210102, None])
def test_str_or_date_rejects_unparseable(value):
    """Unparseable input raises InvalidDateError."""
    with pytest.raises(errors.InvalidDateError):
        common.str_or_date(value)


# ---------------------------------------------------------------------------
# str_to_list
# ---------------------------------------------------------------------------


def test_str_to_list_wraps_single_string():
    """A single symbol becomes a one-element list."""
    assert common.str_to_list("AAPL") == ["AAPL"]


def test_str_to_list_single_element_list_unchanged():
    """A one-element list yields the same symbols."""
    assert common.str_to_list(["AAPL"]) == ["AAPL"]


def test_str_to_list_preserves_order():
    """Multi-symbol sequences keep their order."""
    assert common.str_to_list(("MSFT", "AAPL")) == ["MSFT", "AAPL"]


def test_str_to_list_rejects_non_string_elements():
    """Non-string elements raise TypeArgumentError."""
    with pytest.raises(errors.TypeArgumentError):
        common.str_to_list(["AAPL", 42])


def test_str_to_list_rejects_non_iterable():
    """Scalars other than strings raise TypeArgumentError."""
    with pytest.raises(errors.TypeArgumentError):
        common.str_to_list(42)
