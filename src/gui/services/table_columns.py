"""Column descriptors for the artists table.

Every per-column behaviour (filter predicate, sort comparator, filter
control, sortability) is driven by a ``Column`` descriptor rather than by
special-casing column positions.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from gui.models import ArtistRow
from gui.services.artist_rows import format_percentage

__all__ = [
    "MatchKind",
    "Column",
    "ARTIST_COLUMNS",
    "CATEGORY_OPTIONS",
    "COL_ARTIST",
    "COL_SFW",
    "COL_SHARE_TOTAL",
    "COL_SHARE_TYPE",
    "COL_COMMISSIONS",
    "COL_PICTURES",
    "COL_PICTURE_SHARE",
    "column_at",
    "parse_sort_value",
]

_NON_NUMERIC = re.compile(r"[^0-9.\-]")

CATEGORY_OPTIONS: Tuple[str, ...] = ("", "Yes", "No")


class MatchKind(str, Enum):
    PREFIX_TEXT = "prefixText"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class Column:
    index: int
    label: str
    match_kind: MatchKind
    display: Callable[[ArtistRow], str]
    sortable: bool = True
    step: float | None = None  # numeric input granularity
    contains: bool = False  # full-string contains instead of prefix match

    def cell_text(self, row: ArtistRow) -> str:
        return self.display(row)

    def sort_value(self, row: ArtistRow) -> Tuple[int, float, str]:
        return parse_sort_value(self.cell_text(row), numeric=self.match_kind is MatchKind.NUMERIC)


def parse_sort_value(text: str, *, numeric: bool) -> Tuple[int, float, str]:
    """Comparable key for a displayed cell.

    Numeric columns compare by the number left after stripping everything
    but digits, dots and minus signs (an empty remainder counts as 0).
    Anything that does not parse compares case-insensitively as text and
    after all numbers.
    """
    if numeric:
        cleaned = _NON_NUMERIC.sub("", text)
        try:
            return (0, float(cleaned) if cleaned else 0.0, "")
        except ValueError:
            pass
    return (1, 0.0, text.lower())


COL_ARTIST = 0
COL_SFW = 1
COL_SHARE_TOTAL = 2
COL_SHARE_TYPE = 3
COL_COMMISSIONS = 4
COL_PICTURES = 5
COL_PICTURE_SHARE = 6

ARTIST_COLUMNS: List[Column] = [
    Column(COL_ARTIST, "Artist", MatchKind.PREFIX_TEXT, lambda r: r.key, contains=True),
    Column(
        COL_SFW,
        "? sfw",
        MatchKind.CATEGORICAL,
        lambda r: "Yes" if r.sfw else "No",
        sortable=False,
        contains=True,
    ),
    Column(
        COL_SHARE_TOTAL,
        "% Total",
        MatchKind.NUMERIC,
        lambda r: format_percentage(r.share_of_global),
        step=0.01,
    ),
    Column(
        COL_SHARE_TYPE,
        "% Type",
        MatchKind.NUMERIC,
        lambda r: format_percentage(r.share_of_category),
        step=0.01,
    ),
    Column(
        COL_COMMISSIONS,
        "# Commissions",
        MatchKind.NUMERIC,
        lambda r: str(r.commission_count),
        step=1,
    ),
    Column(
        COL_PICTURES, "# Pictures", MatchKind.NUMERIC, lambda r: str(r.thumbnail_count), step=1
    ),
    Column(
        COL_PICTURE_SHARE,
        "% Pics / Coms",
        MatchKind.NUMERIC,
        lambda r: format_percentage(r.picture_share),
        step=0.01,
    ),
]


def column_at(index: int) -> Column:
    if not 0 <= index < len(ARTIST_COLUMNS):
        raise IndexError(f"No column at index {index}")
    return ARTIST_COLUMNS[index]
