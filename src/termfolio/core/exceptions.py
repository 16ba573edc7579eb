"""
Exception classes for termfolio.
"""

from __future__ import annotations


class TermfolioError(Exception):
    """Base exception for termfolio errors."""


class ProviderError(TermfolioError):
    """A data provider could not produce its records."""


class FetchError(ProviderError):
    """Remote fetch failed (network error or non-2xx response)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 403


class CommandError(TermfolioError):
    """Base exception for command dispatch errors."""


class CommandNotFoundError(CommandError):
    """Command not found in registry."""
