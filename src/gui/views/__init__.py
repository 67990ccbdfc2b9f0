"""GUI view layer (PyQt6 widgets).

Exports:
 - DashboardWindow
 - ArtistTableView
"""

from .artist_table_view import ArtistTableView  # noqa: F401
from .main_window import DashboardWindow  # noqa: F401

__all__ = ["DashboardWindow", "ArtistTableView"]
