"""Global configuration and constants for the statistics dashboard."""

from __future__ import annotations

import os
from typing import Final

STATS_URL: Final = os.environ.get(
    "COMMISSION_EXPLORER_STATS_URL",
    "https://naslku.synology.me/_CommissionExplorerAPI/api/stats.php",
)
DEFAULT_USER_AGENT: Final = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)
DEFAULT_TIMEOUT: Final = float(os.environ.get("COMMISSION_EXPLORER_TIMEOUT", "15"))  # seconds
LOG_LEVEL: Final = os.environ.get("COMMISSION_EXPLORER_LOG_LEVEL", "INFO").upper()

WINDOW_TITLE: Final = "Commission Explorer - Stats"
