"""Exceptions raised by the Cashramp SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashramp.domain.response import CashrampResponse


class CashrampError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigError(CashrampError):
    """Raised when the client cannot be configured (bad env tag, missing secret)."""


class TransportError(CashrampError):
    """Raised when a request could not complete a clean HTTP round trip.

    Covers request serialization failures, network failures and 200 responses
    whose body is not a GraphQL envelope. In the last case ``response`` holds
    the failed ``CashrampResponse`` describing the decode error.
    """

    def __init__(self, message: str, response: CashrampResponse | None = None) -> None:
        super().__init__(message)
        self.response = response


class RequestFailedError(CashrampError):
    """Raised by typed calls when the API answered with a GraphQL or HTTP failure."""

    def __init__(self, response: CashrampResponse) -> None:
        super().__init__(f"request failed: {response.error}")
        self.response = response


class DecodeError(CashrampError):
    """Raised when a successful result does not fit the requested type."""
