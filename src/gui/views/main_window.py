"""Dashboard main window.

Shows a loading placeholder while the stats are fetched once in the
background, then either the error placeholder (server error text shown
verbatim, or a generic failure message) or the summary panels followed by
the artists table. A failed load is terminal until the app is restarted.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

import httpx
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from config import settings
from gui.components.empty_state import EmptyStateWidget
from gui.viewmodels.dashboard_viewmodel import (
    DashboardState,
    DashboardStatus,
    DashboardViewModel,
)
from gui.views.artist_table_view import ArtistTableView
from gui.views.summary_panel_view import SummaryPanelsView
from gui.workers import StatsLoadWorker

__all__ = ["DashboardWindow"]

logger = logging.getLogger(__name__)


class DashboardWindow(QMainWindow):
    def __init__(
        self,
        viewmodel: DashboardViewModel | None = None,
        *,
        url: str | None = None,
        client: Optional[httpx.Client] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.viewmodel = viewmodel or DashboardViewModel()
        self._url = url
        self._client = client
        self._worker: StatsLoadWorker | None = None
        self.panels_view: SummaryPanelsView | None = None
        self.table_view: ArtistTableView | None = None
        self.setWindowTitle(settings.WINDOW_TITLE)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)
        self._build_ui()

    def _build_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        self._layout = QVBoxLayout(content)
        self.state_widget = EmptyStateWidget("loading")
        self.state_widget.setObjectName("dashboardState")
        self.state_widget.hide()
        self._layout.addWidget(self.state_widget)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

    # Loading ---------------------------------------------------------
    def start_loading(self) -> StatsLoadWorker:
        if self._worker is not None:
            return self._worker
        self.state_widget.set_template("loading")
        self.state_widget.show()
        self._worker = StatsLoadWorker(self._url, client=self._client)
        self._worker.finished.connect(self._on_stats_loaded)  # type: ignore
        self._worker.start()
        return self._worker

    def _on_stats_loaded(self, body: Any, error: Optional[BaseException]):
        if error is not None:
            state = self.viewmodel.fail(error)
        else:
            state = self.viewmodel.load(body)
        self.apply_state(state)

    # Rendering -------------------------------------------------------
    def apply_state(self, state: DashboardState):
        if state.status is DashboardStatus.READY and state.table is not None:
            self.state_widget.hide()
            self.panels_view = SummaryPanelsView(state.panels)
            self._layout.addWidget(self.panels_view)
            separator = QFrame()
            separator.setFrameShape(QFrame.Shape.HLine)
            self._layout.addWidget(separator)
            self.table_view = ArtistTableView(state.table)
            self._layout.addWidget(self.table_view)
            if state.table.row_count() == 0:
                self.state_widget.set_template("no_artists")
                self.state_widget.show()
            return
        if state.status is DashboardStatus.ERROR:
            self.state_widget.set_template("stats_error", description=state.error_message or "")
        else:
            self.state_widget.set_template("load_failed")
        self.state_widget.show()
        logger.debug("Dashboard left in %s state", state.status.value)

    # Testing helpers -------------------------------------------------
    def is_state_widget_active(self) -> bool:
        return not self.state_widget.isHidden()
