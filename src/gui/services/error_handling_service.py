"""Error handling service for the dashboard.

Keeps a short history of load failures and uncaught exceptions so the UI
can surface them and tests can inspect them. Every captured error is also
logged.

Error kinds:
 - ``payload``: the server answered with an ``error`` string.
 - ``transport``: the request failed or returned a non-2xx status.
 - ``parse``: the body was not JSON or lacked an expected field.
 - ``uncaught``: anything reaching ``sys.excepthook``.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Deque, List, Optional

from parsing.errors import PayloadFormatError, StatsPayloadError, StatsTransportError

__all__ = ["ErrorKind", "ErrorRecord", "ErrorHandlingService", "classify"]

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    PAYLOAD = "payload"
    TRANSPORT = "transport"
    PARSE = "parse"
    UNCAUGHT = "uncaught"


@dataclass(frozen=True)
class ErrorRecord:
    kind: ErrorKind
    exc_type: type
    message: str
    traceback_str: str
    iso_time: str

    def summary(self, max_len: int = 120) -> str:
        msg = f"{self.exc_type.__name__}: {self.message}"
        return msg if len(msg) <= max_len else msg[: max_len - 3] + "..."


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, StatsPayloadError):
        return ErrorKind.PAYLOAD
    if isinstance(exc, StatsTransportError):
        return ErrorKind.TRANSPORT
    if isinstance(exc, PayloadFormatError):
        return ErrorKind.PARSE
    return ErrorKind.UNCAUGHT


class ErrorHandlingService:
    """Bounded error history with an optional ``sys.excepthook`` adapter."""

    def __init__(self, *, capacity: int = 20) -> None:
        self._errors: Deque[ErrorRecord] = deque(maxlen=max(1, capacity))
        self._installed = False
        self._prev_sys_hook = None

    # Installation ------------------------------------------------------
    def install(self) -> None:
        if self._installed:
            return
        self._prev_sys_hook = sys.excepthook
        sys.excepthook = self._sys_hook  # type: ignore[assignment]
        self._installed = True

    def uninstall(self) -> None:
        if not self._installed:
            return
        if self._prev_sys_hook is not None:
            sys.excepthook = self._prev_sys_hook  # type: ignore[assignment]
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def _sys_hook(self, exc_type, exc_value, tb):  # pragma: no cover - delegate
        self.handle_exception(exc_type, exc_value, tb)
        if self._prev_sys_hook:
            self._prev_sys_hook(exc_type, exc_value, tb)

    # Capture -----------------------------------------------------------
    def record(self, exc: BaseException, kind: Optional[ErrorKind] = None) -> ErrorRecord:
        """Store a handled exception (typically a failed stats load)."""
        return self._store(kind or classify(exc), type(exc), exc, exc.__traceback__)

    def handle_exception(self, exc_type, exc_value, tb) -> ErrorRecord:
        return self._store(ErrorKind.UNCAUGHT, exc_type, exc_value, tb)

    def _store(self, kind: ErrorKind, exc_type, exc_value, tb) -> ErrorRecord:
        record = ErrorRecord(
            kind=kind,
            exc_type=exc_type,
            message=str(exc_value),
            traceback_str="".join(traceback.format_exception(exc_type, exc_value, tb)),
            iso_time=datetime.now(timezone.utc).isoformat(),
        )
        self._errors.append(record)
        if kind is ErrorKind.PAYLOAD:
            logger.warning("Stats endpoint reported an error: %s", record.message)
        elif kind is ErrorKind.UNCAUGHT:
            logger.error("Uncaught exception %s", record.summary())
        else:
            logger.error("Failed to check stats: %s", record.message)
        return record

    # Introspection -----------------------------------------------------
    def recent_errors(self) -> List[ErrorRecord]:
        return list(self._errors)

    def last_error(self) -> Optional[ErrorRecord]:
        return self._errors[-1] if self._errors else None

    def clear(self) -> None:
        self._errors.clear()
