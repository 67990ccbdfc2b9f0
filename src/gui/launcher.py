"""Dedicated launcher module for `python -m gui` or the console script.

Configures logging and the global error hook, creates the QApplication
and the dashboard window, and starts the one-time stats load.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from config import settings
from gui.services.error_handling_service import ErrorHandlingService
from gui.services.logging_service import LoggingService, configure_logging
from gui.viewmodels.dashboard_viewmodel import DashboardViewModel
from gui.views.main_window import DashboardWindow

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - runtime
    configure_logging()
    log_buffer = LoggingService()
    log_buffer.attach_root()
    errors = ErrorHandlingService()
    errors.install()
    app = QApplication.instance() or QApplication(sys.argv)
    logger.info("Loading stats from %s", settings.STATS_URL)
    win = DashboardWindow(DashboardViewModel(errors))
    win.resize(1100, 800)
    win.show()
    win.start_loading()
    code = app.exec()
    errors.uninstall()
    log_buffer.detach_root()
    sys.exit(code)


if __name__ == "__main__":  # pragma: no cover
    main()
