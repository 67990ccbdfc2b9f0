"""Per-column filter engine for the artists table.

Each column holds at most one predicate value. Every row keeps the set of
column indices whose predicate currently fails for it; a row is visible
exactly when that set is empty. Updating one column's predicate only ever
adds or removes that column's index, so filters compose by intersection.

Matching rules (case-insensitive unless categorical):
 - ``contains`` columns: the query must occur anywhere in the cell text.
 - other text/numeric columns: the cell text, truncated to the query's
   length, must equal the query (a prefix match).
 - categorical: the raw selection must occur in the cell text.
An empty predicate value always passes.
"""

from __future__ import annotations
import logging
from typing import Dict, FrozenSet, Iterable, List, Sequence, Set

from gui.models import ArtistRow
from gui.services.table_columns import ARTIST_COLUMNS, Column, MatchKind

__all__ = ["ColumnFilterEngine", "matches"]

logger = logging.getLogger(__name__)


def matches(column: Column, cell_text: str, value: str) -> bool:
    """Return True when ``cell_text`` passes ``column``'s predicate ``value``."""
    if column.match_kind is MatchKind.CATEGORICAL:
        return value == "" or value in cell_text
    query = value.strip().lower()
    if not query:
        return True
    cell = cell_text.strip().lower()
    if column.contains:
        return query in cell
    return cell[: len(query)] == query


class ColumnFilterEngine:
    def __init__(self, rows: Iterable[ArtistRow], columns: Sequence[Column] = ARTIST_COLUMNS):
        self._rows: List[ArtistRow] = list(rows)
        self._columns = list(columns)
        self._values: Dict[int, str] = {}
        self._hidden: Dict[str, Set[int]] = {r.key: set() for r in self._rows}

    # Mutation ------------------------------------------------------
    def set_column_filter(self, column: int, value: str) -> None:
        col = self._column(column)
        value = value or ""
        self._values[column] = value
        for row in self._rows:
            hidden = self._hidden[row.key]
            if not matches(col, col.cell_text(row), value):
                hidden.add(column)
            else:
                hidden.discard(column)
        logger.debug(
            "Filter %r on column %d -> %d of %d rows filtered",
            value,
            column,
            self.filtered_count(),
            len(self._rows),
        )

    def clear_column(self, column: int) -> None:
        self.set_column_filter(column, "")

    def _column(self, index: int) -> Column:
        if not 0 <= index < len(self._columns):
            raise IndexError(f"No column at index {index}")
        return self._columns[index]

    # Query ---------------------------------------------------------
    def filter_value(self, column: int) -> str:
        return self._values.get(column, "")

    def hidden_columns(self, key: str) -> FrozenSet[int]:
        return frozenset(self._hidden[key])

    def is_row_hidden(self, key: str) -> bool:
        return bool(self._hidden[key])

    def filtered_count(self) -> int:
        return sum(1 for cols in self._hidden.values() if cols)

    def visible_count(self) -> int:
        return len(self._rows) - self.filtered_count()

    def results_label(self) -> str:
        """Human readable result count; blank while no row is filtered."""
        if self.filtered_count() == 0:
            return ""
        return f"Search results: {self.visible_count()} results"
