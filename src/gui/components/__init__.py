"""GUI components package.

Reusable widgets shared by the dashboard views. Presently exposes the
empty / error state placeholder and its template registry.
"""

from __future__ import annotations

from .empty_state import (  # noqa: F401
    EmptyStateWidget,
    empty_state_registry,
    get_empty_state_template,
)

__all__ = ["EmptyStateWidget", "empty_state_registry", "get_empty_state_template"]
