"""Commission Explorer dashboard GUI.

Layout:
 - ``gui.models``: typed payload and row records
 - ``gui.services``: row model, filter / visibility / sort engines, logging, errors
 - ``gui.viewmodels``: Qt-free state for the dashboard and the artists table
 - ``gui.views`` / ``gui.components`` / ``gui.charting``: PyQt6 widgets

Importing this package does not import Qt.
"""

from __future__ import annotations
