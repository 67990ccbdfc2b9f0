"""Summary panels (Total / SFW / NSFW) shown above the artists table."""

from __future__ import annotations
from typing import Dict, List, Optional
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from gui.charting.ratio_chart import create_ratio_chart
from gui.services.artist_rows import format_percentage
from gui.services.dashboard_summary import RatioSection, StatItem, SummaryPanel

__all__ = ["SummaryPanelView", "SummaryPanelsView"]


class SummaryPanelView(QFrame):
    def __init__(self, panel: SummaryPanel, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.panel = panel
        self.setObjectName(panel.panel_id)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.section_labels: List[QLabel] = []
        layout = QVBoxLayout(self)
        title = QLabel(panel.panel_id)
        title.setObjectName("panelTitle")
        layout.addWidget(title)
        for section in panel.sections:
            if isinstance(section, StatItem):
                lbl = QLabel(section.text())
                lbl.setObjectName("stat")
                self.section_labels.append(lbl)
                layout.addWidget(lbl)
            elif isinstance(section, RatioSection):
                layout.addWidget(self._ratio_widget(section))
        layout.addStretch(1)

    def _ratio_widget(self, section: RatioSection) -> QWidget:
        box = QWidget()
        box.setObjectName(f"ratio-{section.key}")
        row = QHBoxLayout(box)
        row.setContentsMargins(0, 0, 0, 0)
        values = QVBoxLayout()
        title = QLabel(section.title)
        title.setObjectName("stat")
        self.section_labels.append(title)
        values.addWidget(title)
        for label, share in (
            (section.first_label, section.first_share),
            (section.second_label, section.second_share),
        ):
            lbl = QLabel(f"{label}: {format_percentage(share)}")
            lbl.setObjectName(label)
            self.section_labels.append(lbl)
            values.addWidget(lbl)
        row.addLayout(values)
        row.addWidget(create_ratio_chart(section.first_share, section.second_share))
        return box

    def texts(self) -> List[str]:
        return [lbl.text() for lbl in self.section_labels]


class SummaryPanelsView(QWidget):
    def __init__(self, panels: List[SummaryPanel], parent: Optional[QWidget] = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        self.panels: Dict[str, SummaryPanelView] = {}
        for panel in panels:
            view = SummaryPanelView(panel)
            self.panels[panel.panel_id] = view
            layout.addWidget(view)
