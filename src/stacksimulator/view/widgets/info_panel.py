from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QLabel, QPlainTextEdit, QWidget
from PySide6.QtCore import Qt

from stacksimulator.model.stack import BoundedStack

OPERATIONS_DESCRIPTION = (
    "Push: Adds an element to the top of the stack\n\n"
    "Pop: Removes and returns the element at the top of the stack\n\n"
    "Peek: Returns the top element without removing it\n\n"
    "LIFO Principle:\n"
    "Last-In-First-Out"
)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class InfoPanel(QGroupBox):
    """Right-hand panel with the current stack figures and a short cheat sheet."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Stack Information", parent)
        self.setObjectName("infoPanel")
        self.setMinimumWidth(220)

        layout = QVBoxLayout(self)

        self.lbl_max_size = QLabel("")
        self.lbl_current_size = QLabel("")
        self.lbl_is_empty = QLabel("")
        self.lbl_is_full = QLabel("")
        for lbl in (self.lbl_max_size, self.lbl_current_size, self.lbl_is_empty, self.lbl_is_full):
            layout.addWidget(lbl)

        layout.addSpacing(12)
        ops_header = QLabel("Stack Operations:")
        ops_header.setStyleSheet("font-weight: bold;")
        layout.addWidget(ops_header)

        ops = QPlainTextEdit(OPERATIONS_DESCRIPTION)
        ops.setReadOnly(True)
        ops.setFocusPolicy(Qt.NoFocus)
        layout.addWidget(ops)

    def update_from_stack(self, stack: BoundedStack) -> None:
        self.lbl_max_size.setText(f"Maximum Size: {stack.capacity}")
        self.lbl_current_size.setText(f"Current Size: {stack.size()}")
        self.lbl_is_empty.setText(f"Is Empty: {_yes_no(stack.is_empty())}")
        self.lbl_is_full.setText(f"Is Full: {_yes_no(stack.is_full())}")
