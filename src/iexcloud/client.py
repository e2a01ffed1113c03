"""Configured IEX Cloud client.

:class:`Client` mirrors every endpoint function as a method of the same
name. Methods only supply the stored token, API version and transport;
validation and URL construction stay in the endpoint functions.
"""

import datetime
import os
import pathlib
from collections.abc import Iterable
from typing import Any

import httpx
import structlog

from .common import DEFAULT_TIMEOUT, DEFAULT_VERSION
from .config import CONFIG_ENV_VAR, ClientConfig, configure_logging, load_config
from .marketdata import http as marketdata
from .metrics import RequestMetrics
from .refdata import symbols as refdata
from .transport import HttpxTransport, Transport

logger = structlog.get_logger(__name__)


class Client:
    """IEX Cloud client holding a token and API version.

    Owns a pooled :class:`~iexcloud.transport.HttpxTransport` unless a
    transport is injected. Can be used as an async context manager for
    automatic cleanup. Concurrent calls through one client are independent.
    """

    def __init__(
        self,
        token: str = "",
        version: str = DEFAULT_VERSION,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        metrics: RequestMetrics | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            token: IEX Cloud access token.
            version: API version (default: stable), or ``"sandbox"``.
            timeout: Request timeout in seconds for the default transport.
            transport: Transport to use instead of the default one. The
                client does not close injected transports.
            metrics: Optional request metrics for the default transport.
            http_transport: Optional low-level httpx transport for the
                default transport, e.g. ``httpx.MockTransport``.

        Raises:
            pydantic.ValidationError: If timeout is not positive.
            ValueError: If ``transport`` is combined with ``metrics`` or
                ``http_transport``, which only configure the default transport.
        """
        if transport is not None and (
            metrics is not None or http_transport is not None
        ):
            msg = "metrics and http_transport cannot be used with an injected transport"
            raise ValueError(msg)

        self._config = ClientConfig(token=token, version=version, timeout=timeout)
        self._metrics = metrics
        self._http_transport = http_transport
        self._transport = transport
        self._owns_transport = transport is None

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> "Client":
        """Create a client from a validated configuration.

        Keyword arguments are passed to the constructor.
        """
        client = cls(
            token=config.token.get_secret_value(),
            version=config.version,
            timeout=config.timeout,
            **kwargs,
        )
        client._config = config
        return client

    @classmethod
    def from_config_file(
        cls,
        config_path: str | pathlib.Path | None = None,
        **kwargs: Any,
    ) -> "Client":
        """Create a client from a JSON config file and configure logging.

        Uses ``$IEXCLOUD_CONFIG_PATH`` when no path is given.
        """
        resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        if not resolved_path:
            msg = f"No config path given and {CONFIG_ENV_VAR} is not set"
            raise FileNotFoundError(msg)
        config = load_config(resolved_path)
        configure_logging(config.log_level)
        logger.info("Loaded client configuration", version=config.version)
        return cls.from_config(config, **kwargs)

    @property
    def config(self) -> ClientConfig:
        """Current configuration."""
        return self._config

    @property
    def token(self) -> str:
        """Access token sent with every request."""
        return self._config.token.get_secret_value()

    @property
    def version(self) -> str:
        """API version used for every request."""
        return self._config.version

    @property
    def transport(self) -> Transport:
        """Get or create the transport used by this client."""
        if self._transport is None:
            self._transport = HttpxTransport(
                timeout=self._config.timeout,
                metrics=self._metrics,
                http_transport=self._http_transport,
            )
        return self._transport

    def reconfigure(self, token: str | None = None, version: str | None = None) -> None:
        """Replace the stored token and/or API version."""
        update: dict[str, Any] = {}
        if token is not None:
            update["token"] = token
        if version is not None:
            update["version"] = version
        self._config = ClientConfig.model_validate(
            {**self._config.model_dump(), **update}
        )
        logger.info("Client reconfigured", version=self._config.version)

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    def __repr__(self) -> str:
        return f"Client(version={self.version!r})"

    # ── market data ──────────────────────────────────────────────────────

    async def tops(
        self, symbols: str | Iterable[str] | None = None, filter: str = ""
    ) -> Any:
        """Forward to :func:`iexcloud.marketdata.http.tops`."""
        return await marketdata.tops(
            symbols, self.token, self.version, filter, transport=self.transport
        )

    async def last(
        self, symbols: str | Iterable[str] | None = None, filter: str = ""
    ) -> Any:
        """Forward to :func:`iexcloud.marketdata.http.last`."""
        return await marketdata.last(
            symbols, self.token, self.version, filter, transport=self.transport
        )

    async def deep(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.deep`."""
        return await marketdata.deep(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def auction(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.auction`."""
        return await marketdata.auction(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def book(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.book`."""
        return await marketdata.book(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def op_halt_status(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.op_halt_status`."""
        return await marketdata.op_halt_status(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def official_price(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.official_price`."""
        return await marketdata.official_price(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def security_event(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.security_event`."""
        return await marketdata.security_event(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def ssr_status(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.ssr_status`."""
        return await marketdata.ssr_status(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def system_event(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.system_event`."""
        return await marketdata.system_event(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def trades(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.trades`."""
        return await marketdata.trades(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def trade_break(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.trade_break`."""
        return await marketdata.trade_break(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def trading_status(self, symbol: str | None = None, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.marketdata.http.trading_status`."""
        return await marketdata.trading_status(
            symbol, self.token, self.version, filter, transport=self.transport
        )

    async def hist(
        self, date: str | datetime.date | None = None, filter: str = ""
    ) -> Any:
        """Forward to :func:`iexcloud.marketdata.http.hist`."""
        return await marketdata.hist(
            date, self.token, self.version, filter, transport=self.transport
        )

    # ── reference data ───────────────────────────────────────────────────

    async def symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.symbols`."""
        return await refdata.symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def iex_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.iex_symbols`."""
        return await refdata.iex_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def mutual_fund_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.mutual_fund_symbols`."""
        return await refdata.mutual_fund_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def otc_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.otc_symbols`."""
        return await refdata.otc_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def international_symbols(
        self,
        region: str | None = None,
        exchange: str | None = None,
        filter: str = "",
    ) -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.international_symbols`."""
        return await refdata.international_symbols(
            region, exchange, self.token, self.version, filter, transport=self.transport
        )

    async def fx_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.fx_symbols`."""
        return await refdata.fx_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def options_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.options_symbols`."""
        return await refdata.options_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def crypto_symbols(self, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.crypto_symbols`."""
        return await refdata.crypto_symbols(
            self.token, self.version, filter, transport=self.transport
        )

    async def isin_lookup(self, isin: str, filter: str = "") -> Any:
        """Forward to :func:`iexcloud.refdata.symbols.isin_lookup`."""
        return await refdata.isin_lookup(
            isin, self.token, self.version, filter, transport=self.transport
        )

    async def symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.symbols_list`."""
        return await refdata.symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def iex_symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.iex_symbols_list`."""
        return await refdata.iex_symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def mutual_fund_symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.mutual_fund_symbols_list`."""
        return await refdata.mutual_fund_symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def otc_symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.otc_symbols_list`."""
        return await refdata.otc_symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def international_symbols_list(
        self, region: str | None = None, exchange: str | None = None
    ) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.international_symbols_list`."""
        return await refdata.international_symbols_list(
            region, exchange, self.token, self.version, transport=self.transport
        )

    async def fx_symbols_list(self) -> list[list[str]]:
        """Forward to :func:`iexcloud.refdata.symbols.fx_symbols_list`."""
        return await refdata.fx_symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def options_symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.options_symbols_list`."""
        return await refdata.options_symbols_list(
            self.token, self.version, transport=self.transport
        )

    async def crypto_symbols_list(self) -> list[str]:
        """Forward to :func:`iexcloud.refdata.symbols.crypto_symbols_list`."""
        return await refdata.crypto_symbols_list(
            self.token, self.version, transport=self.transport
        )
