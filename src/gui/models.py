"""GUI-facing lightweight models for the statistics dashboard."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class CountedDetails:
    """A ``{count, details}`` block of the stats payload."""

    count: int
    details: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class CategoryStats:
    """Statistics for one category (SFW or NSFW)."""

    artists_count: int
    artists: List[str]
    commissions: CountedDetails
    thumbnails: CountedDetails


@dataclass(frozen=True)
class StatsPayload:
    sfw: CategoryStats
    nsfw: CategoryStats


@dataclass(frozen=True)
class Totals:
    """Denominators shared by every percentage computation.

    Computed once from the payload and passed explicitly wherever a share
    of a total is needed.
    """

    commissions: int
    sfw_commissions: int
    nsfw_commissions: int

    def category_commissions(self, sfw: bool) -> int:
        return self.sfw_commissions if sfw else self.nsfw_commissions


@dataclass(frozen=True)
class ArtistRow:
    """Represents a single artist's row within the artists table.

    Percentages are pre-computed two-decimal values; ``key`` is the artist
    name and stays stable across sorting and filtering.
    """

    key: str
    sfw: bool
    commission_count: int
    thumbnail_count: int
    share_of_global: float
    share_of_category: float
    picture_share: float
