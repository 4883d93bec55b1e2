"""
Operations Control Panel
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QLineEdit, QGroupBox
)
from PySide6.QtCore import Signal

from stacksimulator.controller.presenter import ButtonStates


class ControlPanel(QWidget):
    """Input field plus one button per stack command."""
    # Raw text of the input field
    push_requested = Signal(str)
    pop_requested = Signal()
    peek_requested = Signal()
    size_requested = Signal()
    is_empty_requested = Signal()
    clear_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("controlPanel")
        self.setMinimumWidth(200)

        layout = QVBoxLayout(self)

        # --- Input ---
        layout.addWidget(QLabel("Enter Value:"))
        self.input_field = QLineEdit()
        self.input_field.setPlaceholderText("Enter number")
        # Enter in the field acts like the Push button
        self.input_field.returnPressed.connect(self.on_push_clicked)
        layout.addWidget(self.input_field)

        # --- Operations ---
        grp = QGroupBox("Operations")
        ops = QVBoxLayout(grp)

        self.btn_push = self._make_button("Push", "primary", self.on_push_clicked)
        self.btn_pop = self._make_button("Pop", "primary", self.pop_requested)
        self.btn_peek = self._make_button("Peek", "primary", self.peek_requested)
        self.btn_size = self._make_button("Size", "secondary", self.size_requested)
        self.btn_is_empty = self._make_button("Is Empty", "secondary", self.is_empty_requested)
        self.btn_clear = self._make_button("Clear Stack", "clear", self.clear_requested)

        for btn in (self.btn_push, self.btn_pop, self.btn_peek,
                    self.btn_size, self.btn_is_empty, self.btn_clear):
            ops.addWidget(btn)

        layout.addWidget(grp)
        layout.addStretch()

    def _make_button(self, text: str, role: str, slot) -> QPushButton:
        btn = QPushButton(text)
        btn.setProperty("role", role)
        btn.setMinimumHeight(36)
        btn.clicked.connect(slot)
        return btn

    # --- SLOTS ---

    def on_push_clicked(self) -> None:
        # returnPressed fires even while Push is disabled
        if self.btn_push.isEnabled():
            self.push_requested.emit(self.input_field.text())

    # --- API ---

    def set_button_states(self, states: ButtonStates) -> None:
        self.btn_push.setEnabled(states.push)
        self.btn_pop.setEnabled(states.pop)
        self.btn_peek.setEnabled(states.peek)

    def clear_input(self) -> None:
        self.input_field.clear()
        self.input_field.setFocus()
