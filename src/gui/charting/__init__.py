"""Charting helpers for the dashboard.

Charts are built with matplotlib and embedded through its QtAgg canvas so
they sit in ordinary Qt layouts.
"""

from __future__ import annotations

from .ratio_chart import create_ratio_chart, pie_slices, RATIO_COLORS  # noqa: F401

__all__ = ["create_ratio_chart", "pie_slices", "RATIO_COLORS"]
