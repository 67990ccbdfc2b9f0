"""Dashboard ViewModel.

Turns the decoded stats body into everything the dashboard window shows:
summary panels plus the artists table, or an error message. The result is
all-or-nothing; a payload that fails validation never yields a partial
table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from gui.models import StatsPayload, Totals
from gui.services.artist_rows import build_artist_rows, build_totals
from gui.services.dashboard_summary import SummaryPanel, build_summary_panels
from gui.services.error_handling_service import ErrorHandlingService, ErrorKind
from gui.viewmodels.artist_table_viewmodel import ArtistTableViewModel
from parsing.errors import StatsError
from parsing.stats_parser import parse_stats

__all__ = ["DashboardStatus", "DashboardState", "DashboardViewModel"]

logger = logging.getLogger(__name__)


class DashboardStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"  # server reported an error string
    FAILED = "failed"  # transport / parse failure


@dataclass
class DashboardState:
    status: DashboardStatus = DashboardStatus.LOADING
    error_message: str | None = None
    payload: StatsPayload | None = None
    totals: Totals | None = None
    panels: List[SummaryPanel] = field(default_factory=list)
    table: ArtistTableViewModel | None = None


class DashboardViewModel:
    def __init__(self, error_service: ErrorHandlingService | None = None):
        self.errors = error_service or ErrorHandlingService()
        self.state = DashboardState()

    def load(self, raw: Any) -> DashboardState:
        """Build the dashboard from a decoded JSON body."""
        try:
            payload = parse_stats(raw)
            totals = build_totals(payload)
            panels = build_summary_panels(payload)
            table = ArtistTableViewModel(build_artist_rows(payload, totals))
        except StatsError as e:
            return self.fail(e)
        self.state = DashboardState(
            status=DashboardStatus.READY,
            payload=payload,
            totals=totals,
            panels=panels,
            table=table,
        )
        logger.info(
            "Dashboard ready: %d artists, %d commissions", table.row_count(), totals.commissions
        )
        return self.state

    def fail(self, exc: BaseException) -> DashboardState:
        """Record a failed load; the table is never built afterwards."""
        record = self.errors.record(exc)
        status = DashboardStatus.ERROR if record.kind is ErrorKind.PAYLOAD else DashboardStatus.FAILED
        self.state = DashboardState(status=status, error_message=record.message)
        return self.state
