"""Empty / error state component & registry.

Surfaces the dashboard's non-table states (loading, server-reported
error, failed load, no artists) through one widget so the window swaps a
single placeholder instead of building ad-hoc labels.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel

__all__ = [
    "EmptyStateTemplate",
    "EmptyStateRegistry",
    "empty_state_registry",
    "get_empty_state_template",
    "EmptyStateWidget",
]


@dataclass(frozen=True)
class EmptyStateTemplate:
    """Template definition for a reusable empty/error/info state."""

    key: str
    title: str
    description: str


class EmptyStateRegistry:
    """Registry holding templates for empty/error states."""

    def __init__(self):
        self._templates: Dict[str, EmptyStateTemplate] = {}
        self._bootstrap_defaults()

    def _bootstrap_defaults(self):
        for tpl in (
            EmptyStateTemplate("loading", "Loading...", "Fetching the latest statistics."),
            EmptyStateTemplate("stats_error", "Error", "The statistics service reported an error."),
            EmptyStateTemplate(
                "load_failed",
                "Failed to check stats",
                "The statistics could not be loaded. Reload to try again.",
            ),
            EmptyStateTemplate("no_artists", "No Artists", "The statistics list no artists yet."),
        ):
            self.register(tpl)

    def register(self, template: EmptyStateTemplate) -> None:
        self._templates[template.key] = template

    def get(self, key: str) -> Optional[EmptyStateTemplate]:
        return self._templates.get(key)

    def all_keys(self):  # pragma: no cover - trivial iteration
        return list(self._templates.keys())


def get_empty_state_template(key: str) -> Optional[EmptyStateTemplate]:
    return empty_state_registry.get(key)


empty_state_registry = EmptyStateRegistry()


class EmptyStateWidget(QWidget):
    """Widget rendering a single EmptyStateTemplate."""

    def __init__(
        self,
        template_key: str,
        parent: Optional[QWidget] = None,
        *_,
        override: Optional[Callable[[EmptyStateTemplate], EmptyStateTemplate]] = None,
    ):
        super().__init__(parent)
        self._template_key = template_key
        self._template = empty_state_registry.get(template_key) or EmptyStateTemplate(
            template_key, "Unavailable", "No template found."
        )
        if override:
            self._template = override(self._template)
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)
        self.title_label = QLabel(self._template.title)
        self.title_label.setObjectName("emptyStateTitle")
        layout.addWidget(self.title_label)
        self.desc_label = QLabel(self._template.description)
        self.desc_label.setObjectName("emptyStateDesc")
        self.desc_label.setWordWrap(True)
        layout.addWidget(self.desc_label)
        layout.addStretch(1)

    # API --------------------------------------------------------------
    def template_key(self) -> str:
        return self._template_key

    def set_template(self, key: str, *, description: str | None = None):
        tpl = empty_state_registry.get(key)
        if not tpl:
            return
        if description is not None:
            tpl = replace(tpl, description=description)
        self._template_key = key
        self._template = tpl
        self.title_label.setText(tpl.title)
        self.desc_label.setText(tpl.description)
