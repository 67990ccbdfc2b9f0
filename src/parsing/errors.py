"""Structured errors raised while loading the statistics payload."""

from __future__ import annotations
from typing import Any


class StatsError(Exception):
    """Base class for stats loading issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class StatsPayloadError(StatsError):
    """Raised when the upstream payload carries an ``error`` string.

    The message is the upstream text, verbatim.
    """


class PayloadFormatError(StatsError):
    """Raised when the body is not JSON or lacks an expected field."""


class StatsTransportError(StatsError):
    """Raised when the HTTP request itself fails."""
