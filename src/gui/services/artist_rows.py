"""Artist row construction (row model for the artists table).

Takes a validated ``StatsPayload`` and produces display-ready
``ArtistRow`` records:
 - Merges SFW and NSFW artists into one name-sorted sequence.
 - Flags each artist as SFW when it has an entry in the SFW commissions.
 - Pre-computes every derived percentage against an explicit ``Totals``.

Construction is all-or-nothing: either every row is built or the
exception propagates and no rows exist.
"""

from __future__ import annotations
import math
from typing import List

from gui.models import ArtistRow, StatsPayload, Totals

__all__ = [
    "calculate_percentage",
    "format_percentage",
    "build_totals",
    "build_artist_rows",
]


def calculate_percentage(numerator: float, denominator: float) -> float:
    """Share of ``numerator`` in ``denominator`` as a two-decimal percentage.

    Halves round up rather than to even. Returns ``0`` when the
    denominator is zero.
    """
    if denominator == 0:
        return 0
    return math.floor(numerator / denominator * 10000 + 0.5) / 100


def format_percentage(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text}%"


def build_totals(payload: StatsPayload) -> Totals:
    sfw = payload.sfw.commissions.count
    nsfw = payload.nsfw.commissions.count
    return Totals(commissions=sfw + nsfw, sfw_commissions=sfw, nsfw_commissions=nsfw)


def build_artist_rows(payload: StatsPayload, totals: Totals | None = None) -> List[ArtistRow]:
    totals = totals or build_totals(payload)
    sfw_commissions = payload.sfw.commissions.details
    nsfw_commissions = payload.nsfw.commissions.details
    sfw_thumbs = payload.sfw.thumbnails.details
    nsfw_thumbs = payload.nsfw.thumbnails.details

    names = sorted(set(payload.sfw.artists) | set(payload.nsfw.artists))
    rows: List[ArtistRow] = []
    for name in names:
        is_sfw = name in sfw_commissions
        if is_sfw:
            commissions = sfw_commissions[name]
            thumbnails = sfw_thumbs.get(name, 0)
        else:
            commissions = nsfw_commissions.get(name, 0)
            thumbnails = nsfw_thumbs.get(name, 0)
        rows.append(
            ArtistRow(
                key=name,
                sfw=is_sfw,
                commission_count=commissions,
                thumbnail_count=thumbnails,
                share_of_global=calculate_percentage(commissions, totals.commissions),
                share_of_category=calculate_percentage(
                    commissions, totals.category_commissions(is_sfw)
                ),
                picture_share=calculate_percentage(thumbnails, commissions),
            )
        )
    return rows
