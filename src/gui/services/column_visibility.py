"""Row and column visibility for the artists table.

Row visibility is a projection of the filter engine's per-row failing
column sets; nothing is stored twice. Column visibility covers the two
mutually exclusive share columns: "% Total" while no category is pinned,
"% Type" once the categorical filter selects one.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from gui.models import ArtistRow
from gui.services.column_filter import ColumnFilterEngine
from gui.services.table_columns import COL_SFW, COL_SHARE_TOTAL, COL_SHARE_TYPE


@dataclass
class ColumnVisibilityState:
    visible: Dict[int, bool] = field(default_factory=dict)

    def is_visible(self, column: int) -> bool:
        return self.visible.get(column, True)

    def set_visible(self, column: int, flag: bool):
        self.visible[column] = flag

    def hidden_columns(self) -> List[int]:
        return sorted(c for c, flag in self.visible.items() if not flag)


class VisibilityCoordinator:
    def __init__(
        self,
        rows: Iterable[ArtistRow],
        filters: ColumnFilterEngine,
        *,
        categorical_column: int = COL_SFW,
        global_share_column: int = COL_SHARE_TOTAL,
        category_share_column: int = COL_SHARE_TYPE,
    ):
        self._keys = [r.key for r in rows]
        self._filters = filters
        self.categorical_column = categorical_column
        self._global_share = global_share_column
        self._category_share = category_share_column
        self.columns = ColumnVisibilityState()
        self.on_categorical_changed(filters.filter_value(categorical_column))

    def is_row_visible(self, key: str) -> bool:
        return not self._filters.is_row_hidden(key)

    def hidden_rows(self) -> Set[str]:
        return {k for k in self._keys if self._filters.is_row_hidden(k)}

    def on_categorical_changed(self, value: str) -> None:
        pinned = value != ""
        self.columns.set_visible(self._global_share, not pinned)
        self.columns.set_visible(self._category_share, pinned)

    def column_visibility(self) -> Dict[int, bool]:
        return {
            self._global_share: self.columns.is_visible(self._global_share),
            self._category_share: self.columns.is_visible(self._category_share),
        }


__all__ = ["ColumnVisibilityState", "VisibilityCoordinator"]
