"""IEX Cloud client.

Asyncio client for the IEX Cloud REST API. Every endpoint is available both
as a free function taking explicit credentials and as a method on
:class:`Client`, which supplies its configured token and API version.
"""

from .client import Client
from .common import DEFAULT_TIMEOUT, DEFAULT_VERSION
from .config import ClientConfig, configure_logging, load_config
from .errors import (
    DecodeError,
    IEXCloudError,
    InvalidDateError,
    RequestError,
    TypeArgumentError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_VERSION",
    "Client",
    "ClientConfig",
    "DecodeError",
    "IEXCloudError",
    "InvalidDateError",
    "RequestError",
    "TypeArgumentError",
    "configure_logging",
    "load_config",
]
