"""IEX Cloud reference data endpoints."""

from . import symbols

__all__ = ["symbols"]
