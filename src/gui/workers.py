"""Background worker thread for the one-time stats load."""

from __future__ import annotations
import logging
from typing import Optional

import httpx
from PyQt6.QtCore import QThread, pyqtSignal

from core.http_client import fetch_json
from parsing.errors import StatsError, StatsTransportError

logger = logging.getLogger(__name__)


class StatsLoadWorker(QThread):
    finished = pyqtSignal(object, object)  # decoded body | None, StatsError | None

    def __init__(self, url: str | None = None, *, client: Optional[httpx.Client] = None):
        super().__init__()
        self.url = url
        self.client = client

    def run(self) -> None:  # type: ignore[override]
        """Fetch the stats body once; emits exactly one ``finished``."""
        try:
            body = fetch_json(self.url, client=self.client)
        except StatsError as e:
            self.finished.emit(None, e)
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected stats load failure")
            self.finished.emit(None, StatsTransportError(str(e)))
        else:
            self.finished.emit(body, None)
        finally:
            logger.debug("Stats checked.")
