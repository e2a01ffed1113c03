"""Client configuration and logging setup."""

import logging
import pathlib
from typing import Any

import pydantic
import structlog

from .common import DEFAULT_TIMEOUT, DEFAULT_VERSION

CONFIG_ENV_VAR = "IEXCLOUD_CONFIG_PATH"

# Event keys whose values are masked before rendering.
REDACTED_KEYS = frozenset({"token", "api_token", "secret"})


class ClientConfig(pydantic.BaseModel):
    """Configuration for an IEX Cloud client.

    The token is a ``SecretStr`` so it never shows up in ``repr``, ``str``
    or ``model_dump_json`` output; read it with ``get_secret_value()``.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    token: pydantic.SecretStr = pydantic.Field(
        pydantic.SecretStr(""),
        description="IEX Cloud access token",
    )
    version: str = pydantic.Field(
        DEFAULT_VERSION,
        description="API version, or 'sandbox' for the sandbox host",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")


def _redact_secrets(
    _logger: Any,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Mask credential-like event keys."""
    for key in REDACTED_KEYS & event_dict.keys():
        event_dict[key] = "**********"
    return event_dict


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output with credentials masked.

    Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, log_level_name.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _redact_secrets,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
                drop_missing=True,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | pathlib.Path) -> ClientConfig:
    """Load and validate a client configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the content is not valid JSON or fails
            validation.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)
    return ClientConfig.model_validate_json(path.read_text())
