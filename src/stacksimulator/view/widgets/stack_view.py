"""
Stack Visualisation Widget
==========================
Draws the stack as a vertical column of cells with a capacity gauge above it.
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar, QFrame
)
from PySide6.QtCore import Qt

from stacksimulator.controller.presenter import format_value
from stacksimulator.controller.render_model import StackRenderModel, StackRow, GaugeBand

GAUGE_COLORS = {
    GaugeBand.LOW: "#66BB6A",     # Green
    GaugeBand.MEDIUM: "#FDD835",  # Yellow
    GaugeBand.HIGH: "#EF5350",    # Red
}

TOP_MARKER = "← TOP"


class StackRowWidget(QWidget):
    """One row: index label, value cell and the optional top marker."""

    def __init__(self, row: StackRow, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.row = row

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.lbl_index = QLabel("" if row.is_empty else f"[{row.index}]")
        self.lbl_index.setObjectName("indexLabel")
        self.lbl_index.setFixedWidth(40)
        self.lbl_index.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.lbl_index)

        self.lbl_cell = QLabel(self._cell_text(row))
        self.lbl_cell.setObjectName("stackCell")
        self.lbl_cell.setProperty("sign", "empty" if row.is_empty else row.sign.value)
        self.lbl_cell.setAlignment(Qt.AlignCenter)
        self.lbl_cell.setFixedSize(200, 44)
        layout.addWidget(self.lbl_cell)

        self.lbl_top = QLabel(TOP_MARKER if row.is_top else "")
        self.lbl_top.setObjectName("topMarker")
        self.lbl_top.setFixedWidth(60)
        layout.addWidget(self.lbl_top)

    @staticmethod
    def _cell_text(row: StackRow) -> str:
        if row.is_empty:
            return "---  (empty)"
        return format_value(row.value)


class StackView(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.model: StackRenderModel | None = None
        self.row_widgets: list[StackRowWidget] = []

        layout = QVBoxLayout(self)

        # --- Capacity gauge ---
        self.lbl_capacity = QLabel("")
        self.lbl_capacity.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_capacity)

        self.gauge = QProgressBar()
        self.gauge.setRange(0, 100)
        self.gauge.setFixedWidth(250)
        self.gauge.setTextVisible(False)
        layout.addWidget(self.gauge, 0, Qt.AlignHCenter)

        line = QFrame()
        line.setFrameShape(QFrame.HLine)
        line.setFrameShadow(QFrame.Sunken)
        layout.addWidget(line)

        # --- Cells (rebuilt on every render) ---
        layout.addStretch()
        self.rows_layout = QVBoxLayout()
        self.rows_layout.setSpacing(4)
        layout.addLayout(self.rows_layout)

    def set_model(self, model: StackRenderModel) -> None:
        self.model = model

        self.lbl_capacity.setText(model.capacity_label)
        self.gauge.setValue(model.fill_percent)
        self.gauge.setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {GAUGE_COLORS[model.band]}; }}"
        )

        for w in self.row_widgets:
            self.rows_layout.removeWidget(w)
            w.deleteLater()
        self.row_widgets = []

        for row in model.rows:
            w = StackRowWidget(row, self)
            self.rows_layout.addWidget(w, 0, Qt.AlignHCenter)
            self.row_widgets.append(w)

    @property
    def top_row(self) -> StackRowWidget | None:
        for w in self.row_widgets:
            if w.row.is_top:
                return w
        return None
