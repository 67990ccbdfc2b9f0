"""Service layer exports.

Responsibilities:
 - Row model (`build_artist_rows`, `calculate_percentage`)
 - Column descriptors and the filter / visibility / sort engines
 - Logging and error handling services

Everything here is Qt-free.
"""

from .artist_rows import build_artist_rows, build_totals, calculate_percentage  # noqa: F401
from .column_filter import ColumnFilterEngine  # noqa: F401
from .column_visibility import VisibilityCoordinator  # noqa: F401
from .multi_column_sort import SortEngine, SortState  # noqa: F401

__all__ = [
    "build_artist_rows",
    "build_totals",
    "calculate_percentage",
    "ColumnFilterEngine",
    "VisibilityCoordinator",
    "SortEngine",
    "SortState",
]
