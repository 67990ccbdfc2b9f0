"""Summary panels shown above the artists table.

Three panels are derived from the payload: "Total" (combined ratios),
"SFW" and "NSFW" (per-category counts plus picture ratio). Each ratio
section carries the two shares it splits into, so views only lay them out.
"""

from __future__ import annotations
import math
import sys
from dataclasses import dataclass
from typing import List, Tuple, Union

from gui.models import CategoryStats, StatsPayload
from gui.services.artist_rows import calculate_percentage

__all__ = ["StatItem", "RatioSection", "SummaryPanel", "build_summary_panels", "remaining_share"]


@dataclass(frozen=True)
class StatItem:
    label: str
    value: int

    def text(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class RatioSection:
    key: str
    title: str
    first_label: str
    first_share: float
    second_label: str
    second_share: float


Section = Union[StatItem, RatioSection]


@dataclass(frozen=True)
class SummaryPanel:
    panel_id: str
    sections: Tuple[Section, ...]


def remaining_share(share: float) -> float:
    """``100 - share`` rounded half up to two decimals."""
    return math.floor((100 - share + sys.float_info.epsilon) * 100 + 0.5) / 100


def _split_section(label: str, payload: StatsPayload, field: str) -> RatioSection:
    if field == "artists":
        sfw, nsfw = payload.sfw.artists_count, payload.nsfw.artists_count
    else:
        sfw, nsfw = payload.sfw.commissions.count, payload.nsfw.commissions.count
    total = sfw + nsfw
    share = calculate_percentage(sfw, total)
    return RatioSection(
        key=field,
        title=f"{label}: {total}",
        first_label="sfw",
        first_share=share,
        second_label="nsfw",
        second_share=remaining_share(share),
    )


def _images_total(payload: StatsPayload) -> RatioSection:
    images = payload.sfw.thumbnails.count + payload.nsfw.thumbnails.count
    commissions = payload.sfw.commissions.count + payload.nsfw.commissions.count
    others = commissions - images
    share = calculate_percentage(images, commissions)
    return RatioSection(
        key="images",
        title=f"Images: {images} - Others: {others}",
        first_label="pictures",
        first_share=share,
        second_label="others",
        second_share=remaining_share(share),
    )


def _images_category(cat: CategoryStats, name: str) -> RatioSection:
    images = cat.thumbnails.count
    others = cat.commissions.count - images
    return RatioSection(
        key=f"images-{name}",
        title=f"Pictures: {images} - Others: {others}",
        first_label="pictures",
        first_share=calculate_percentage(images, cat.commissions.count),
        second_label="others",
        second_share=calculate_percentage(others, cat.commissions.count),
    )


def build_summary_panels(payload: StatsPayload) -> List[SummaryPanel]:
    panels = [
        SummaryPanel(
            "Total",
            (
                _split_section("Artistes", payload, "artists"),
                _split_section("Commissions", payload, "commissions"),
                _images_total(payload),
            ),
        )
    ]
    for panel_id, cat in (("SFW", payload.sfw), ("NSFW", payload.nsfw)):
        panels.append(
            SummaryPanel(
                panel_id,
                (
                    StatItem("Artistes", cat.artists_count),
                    StatItem("Commissions", cat.commissions.count),
                    _images_category(cat, panel_id.lower()),
                ),
            )
        )
    return panels
