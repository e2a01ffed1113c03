"""Exceptions raised by the IEX Cloud client."""


class IEXCloudError(Exception):
    """Base class for all client errors."""


class TypeArgumentError(IEXCloudError, TypeError):
    """Raised when an argument has the wrong shape.

    Typically a sequence passed where an endpoint accepts a single symbol.
    """


class InvalidDateError(IEXCloudError, ValueError):
    """Raised when a date argument cannot be normalized to YYYYMMDD."""


class RequestError(IEXCloudError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code returned by the API.
        body: Raw response body, kept for diagnostics.
    """

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Response {status} - {body}")


class DecodeError(IEXCloudError, ValueError):
    """Raised when a successful response body is not valid JSON."""

    def __init__(self, body: str):
        self.body = body
        preview = body[:200]
        super().__init__(f"Response body is not valid JSON: {preview!r}")
