"""Multi-column sorting for the artists table.

``SortState`` is the ordered list of (column, direction) keys the user
builds by clicking headers; the first key inserted has the highest
priority. Clicking an unlisted sortable column appends it ascending,
clicking an ascending key flips it to descending, clicking a descending
key removes it.

Row ordering is delegated to ``MultiColumnSorter``, which applies stable
sorts from the lowest-priority key to the highest. This is equivalent to
comparing row pairs key by key and taking the first non-zero result, and
rows that tie on every key keep their original relative order.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

from gui.models import ArtistRow
from gui.services.table_columns import ARTIST_COLUMNS, COL_ARTIST, Column

T = TypeVar("T")
KeyFunc = Callable[[T], object]

logger = logging.getLogger(__name__)

__all__ = [
    "SortKey",
    "MultiColumnSorter",
    "SortDirection",
    "ColumnSortKey",
    "SortState",
    "SortEngine",
]


@dataclass(frozen=True)
class SortKey:
    key_func: KeyFunc
    ascending: bool = True


class MultiColumnSorter(Generic[T]):
    """Stable multi-key sort over a fixed base ordering.

    Usage:
        sorter = MultiColumnSorter(rows)
        rows_sorted = sorter.sort([
            SortKey(lambda r: r.commission_count, ascending=False),
            SortKey(lambda r: r.key.lower(), ascending=True),
        ])
    """

    def __init__(self, rows: Iterable[T]):
        self._rows: List[T] = list(rows)

    def sort(self, keys: Sequence[SortKey]) -> List[T]:
        # Lowest precedence first; list.sort stays stable with reverse=True
        result = list(self._rows)
        for sk in reversed(keys):
            result.sort(key=sk.key_func, reverse=not sk.ascending)
        return result

    @staticmethod
    def single(rows: Iterable[T], key: KeyFunc, ascending: bool = True) -> List[T]:
        return sorted(rows, key=key, reverse=not ascending)


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass
class ColumnSortKey:
    column: int
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASCENDING


class SortState:
    """Priority-ordered sort keys, unique by column."""

    def __init__(self, keys: Iterable[ColumnSortKey] = ()):
        self._keys: List[ColumnSortKey] = []
        for k in keys:
            if self.find(k.column) is not None:
                raise ValueError(f"Column {k.column} listed twice")
            self._keys.append(ColumnSortKey(k.column, k.direction))

    def find(self, column: int) -> Optional[int]:
        return next((i for i, k in enumerate(self._keys) if k.column == column), None)

    def toggle(self, column: int) -> Optional[SortDirection]:
        """Advance ``column`` through asc -> desc -> absent; return the new direction."""
        idx = self.find(column)
        if idx is None:
            self._keys.append(ColumnSortKey(column, SortDirection.ASCENDING))
            return SortDirection.ASCENDING
        key = self._keys[idx]
        if key.direction is SortDirection.ASCENDING:
            key.direction = SortDirection.DESCENDING
            return SortDirection.DESCENDING
        del self._keys[idx]
        return None

    def direction_of(self, column: int) -> Optional[SortDirection]:
        idx = self.find(column)
        return None if idx is None else self._keys[idx].direction

    def keys(self) -> List[ColumnSortKey]:
        return [ColumnSortKey(k.column, k.direction) for k in self._keys]

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)


class SortEngine:
    def __init__(
        self,
        columns: Sequence[Column] = ARTIST_COLUMNS,
        *,
        fallback_column: int = COL_ARTIST,
        state: SortState | None = None,
    ):
        self._columns = {c.index: c for c in columns}
        self._fallback = self._columns[fallback_column]
        self.state = state if state is not None else SortState()

    def click_column(self, column: int) -> bool:
        """Apply a header click. Returns False when the column is not sortable."""
        col = self._columns.get(column)
        if col is None:
            raise IndexError(f"No column at index {column}")
        if not col.sortable:
            return False
        direction = self.state.toggle(column)
        logger.debug(
            "Sort click on column %d -> %s; keys=%s",
            column,
            direction.value if direction else "removed",
            [(k.column, k.direction.value) for k in self.state.keys()],
        )
        return True

    def positions(self) -> Dict[int, int]:
        """1-based priority rank per actively sorted column."""
        return {k.column: rank for rank, k in enumerate(self.state.keys(), start=1)}

    def order(self, rows: Iterable[ArtistRow]) -> List[ArtistRow]:
        if not self.state:
            return MultiColumnSorter.single(rows, self._fallback.sort_value, True)
        sort_keys = [
            SortKey(self._columns[k.column].sort_value, k.ascending) for k in self.state.keys()
        ]
        return MultiColumnSorter(rows).sort(sort_keys)
