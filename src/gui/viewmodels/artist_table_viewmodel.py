"""ViewModel for the artists table.

Owns the row model output plus the filter, visibility and sort state of
one table instance. Each user interaction is a handler method that
mutates that state completely and returns an immutable ``TableSnapshot``
describing what the view must show, so the whole table can be exercised
without a rendering surface.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from gui.models import ArtistRow
from gui.services.column_filter import ColumnFilterEngine
from gui.services.column_visibility import VisibilityCoordinator
from gui.services.multi_column_sort import SortDirection, SortEngine
from gui.services.table_columns import ARTIST_COLUMNS, COL_SFW, Column

__all__ = ["ArtistTableViewModel", "TableSnapshot", "RenderedRow"]

logger = logging.getLogger(__name__)

_ARROWS = {SortDirection.ASCENDING: "▲", SortDirection.DESCENDING: "▼"}


@dataclass(frozen=True)
class RenderedRow:
    row: ArtistRow
    cells: Tuple[str, ...]
    visible: bool
    stripe: str  # "even" / "odd" by rendered position

    @property
    def key(self) -> str:
        return self.row.key


@dataclass(frozen=True)
class TableSnapshot:
    rows: Tuple[RenderedRow, ...]
    header_labels: Tuple[str, ...]
    positions: Dict[int, int] = field(default_factory=dict)
    column_visibility: Dict[int, bool] = field(default_factory=dict)
    results_label: str = ""

    def keys(self) -> List[str]:
        return [r.key for r in self.rows]

    def visible_keys(self) -> List[str]:
        return [r.key for r in self.rows if r.visible]


class ArtistTableViewModel:
    def __init__(
        self,
        rows: Sequence[ArtistRow],
        columns: Sequence[Column] = ARTIST_COLUMNS,
        *,
        categorical_column: int = COL_SFW,
    ):
        self.columns = list(columns)
        self._rows: List[ArtistRow] = list(rows)
        self.filters = ColumnFilterEngine(self._rows, self.columns)
        self.visibility = VisibilityCoordinator(
            self._rows, self.filters, categorical_column=categorical_column
        )
        self.sorter = SortEngine(self.columns)
        self._ordered: List[ArtistRow] = self.sorter.order(self._rows)

    # Handlers ------------------------------------------------------------
    def apply_filter(self, column: int, value: str) -> TableSnapshot:
        self.filters.set_column_filter(column, value)
        if column == self.visibility.categorical_column:
            self.visibility.on_categorical_changed(value)
        return self.snapshot()

    def clear_filter(self, column: int) -> TableSnapshot:
        return self.apply_filter(column, "")

    def click_header(self, column: int) -> TableSnapshot:
        if self.sorter.click_column(column):
            self._ordered = self.sorter.order(self._rows)
        return self.snapshot()

    # Projection ----------------------------------------------------------
    def header_label(self, column: int) -> str:
        col = self.columns[column]
        direction = self.sorter.state.direction_of(column)
        if direction is None:
            return col.label
        return f"{col.label} {_ARROWS[direction]}{self.sorter.positions()[column]}"

    def snapshot(self) -> TableSnapshot:
        rendered = tuple(
            RenderedRow(
                row=r,
                cells=tuple(c.cell_text(r) for c in self.columns),
                visible=self.visibility.is_row_visible(r.key),
                stripe="even" if pos % 2 == 0 else "odd",
            )
            for pos, r in enumerate(self._ordered)
        )
        return TableSnapshot(
            rows=rendered,
            header_labels=tuple(self.header_label(c.index) for c in self.columns),
            positions=self.sorter.positions(),
            column_visibility=self.visibility.column_visibility(),
            results_label=self.filters.results_label(),
        )

    def row_count(self) -> int:
        return len(self._rows)
