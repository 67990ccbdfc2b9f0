"""ArtistTableView

QTableWidget-based view of the artists table. Backed by
``ArtistTableViewModel``: header clicks and filter edits are forwarded to
the viewmodel and the returned snapshot is rendered as-is. Qt's built-in
sorting stays disabled so the displayed order always comes from the sort
engine.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Union
from PyQt6.QtCore import QLocale, Qt
from PyQt6.QtGui import QColor, QDoubleValidator
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from gui.services.table_columns import CATEGORY_OPTIONS, Column, MatchKind
from gui.viewmodels.artist_table_viewmodel import ArtistTableViewModel, TableSnapshot

__all__ = ["ArtistTableView"]

FilterControl = Union[QLineEdit, QComboBox]

_ODD_ROW = QColor("#f2f2f2")
_CATEGORY_COLORS = {"Yes": QColor("#2e7d32"), "No": QColor("#c62828")}


class ArtistTableView(QWidget):
    def __init__(self, viewmodel: ArtistTableViewModel, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.viewmodel = viewmodel
        self.filter_inputs: Dict[int, FilterControl] = {}
        self._build_ui()
        self._render(self.viewmodel.snapshot())

    def _build_ui(self):
        root = QVBoxLayout(self)
        self.results_label = QLabel(" ")
        self.results_label.setObjectName("searchResults")
        root.addWidget(self.results_label)

        filter_bar = QWidget()
        self._filter_layout = QHBoxLayout(filter_bar)
        self._filter_layout.setContentsMargins(0, 0, 0, 0)
        self._filter_layout.setSpacing(0)
        for col in self.viewmodel.columns:
            control = self._make_filter_control(col)
            self.filter_inputs[col.index] = control
            self._filter_layout.addWidget(control)
        root.addWidget(filter_bar)

        self.table = QTableWidget(0, len(self.viewmodel.columns))
        self.table.setObjectName("artists")
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        header.setSectionsClickable(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        header.sectionResized.connect(self._sync_filter_width)  # type: ignore
        root.addWidget(self.table)
        for col in self.viewmodel.columns:
            self._sync_filter_width(col.index, 0, header.sectionSize(col.index))

    def _make_filter_control(self, col: Column) -> FilterControl:
        if col.match_kind is MatchKind.CATEGORICAL:
            combo = QComboBox()
            combo.addItems(list(CATEGORY_OPTIONS))
            combo.currentTextChanged.connect(  # type: ignore
                lambda text, idx=col.index: self._on_filter_changed(idx, text)
            )
            return combo
        edit = QLineEdit()
        edit.setPlaceholderText(col.label)
        edit.setObjectName("search")
        if col.match_kind is MatchKind.NUMERIC:
            decimals = 0 if col.step is not None and col.step >= 1 else 2
            validator = QDoubleValidator(0.0, 1e12, decimals, edit)
            validator.setLocale(QLocale.c())
            validator.setNotation(QDoubleValidator.Notation.StandardNotation)
            edit.setValidator(validator)
        edit.textChanged.connect(  # type: ignore
            lambda text, idx=col.index: self._on_filter_changed(idx, text)
        )
        return edit

    # Callbacks -------------------------------------------------------
    def _on_header_clicked(self, logical_index: int):
        self._render(self.viewmodel.click_header(logical_index))

    def _on_filter_changed(self, column: int, value: str):
        self._render(self.viewmodel.apply_filter(column, value))

    def _sync_filter_width(self, logical_index: int, _old: int, new: int):
        control = self.filter_inputs.get(logical_index)
        if control is not None:
            control.setFixedWidth(max(new, 1))

    # Programmatic API (tests / main window) --------------------------
    def set_filter_text(self, column: int, value: str):
        control = self.filter_inputs[column]
        if isinstance(control, QComboBox):
            control.setCurrentIndex(max(control.findText(value), 0))
        else:
            control.setText(value)

    def click_header(self, column: int):
        self._on_header_clicked(column)

    # Rendering -------------------------------------------------------
    def _render(self, snapshot: TableSnapshot):
        self.table.setHorizontalHeaderLabels(list(snapshot.header_labels))
        self.table.setRowCount(len(snapshot.rows))
        category_col = self.viewmodel.visibility.categorical_column
        for r, rendered in enumerate(snapshot.rows):
            background = _ODD_ROW if rendered.stripe == "odd" else None
            for c, text in enumerate(rendered.cells):
                item = QTableWidgetItem(text)
                item.setData(Qt.ItemDataRole.UserRole, rendered.key)
                if background is not None:
                    item.setBackground(background)
                if c == category_col and text in _CATEGORY_COLORS:
                    item.setForeground(_CATEGORY_COLORS[text])
                self.table.setItem(r, c, item)
            self.table.setRowHidden(r, not rendered.visible)
        for col, visible in snapshot.column_visibility.items():
            self.table.setColumnHidden(col, not visible)
            self.filter_inputs[col].setVisible(visible)
        self.results_label.setText(snapshot.results_label or " ")

    # Testing helpers -------------------------------------------------
    def row_keys(self) -> List[str]:
        return [
            self.table.item(r, 0).data(Qt.ItemDataRole.UserRole)
            for r in range(self.table.rowCount())
        ]

    def visible_keys(self) -> List[str]:
        return [k for r, k in enumerate(self.row_keys()) if not self.table.isRowHidden(r)]
