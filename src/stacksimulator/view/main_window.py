"""
Main Application Window
=======================
The simulator window: operations on the left, the stack column in the
centre, stack figures on the right and the status bar at the bottom.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the control panel buttons to the presenter and shows
   the returned feedback (status line, alerts, button states, redraw).
"""
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QLabel, QMessageBox, QFrame
)
from PySide6.QtCore import QTimer

from stacksimulator.app.application import VISIBLE_APP_NAME
from stacksimulator.controller.presenter import StackPresenter, Feedback, Alert, Status
from stacksimulator.view.panels.control_panel import ControlPanel
from stacksimulator.view.widgets.info_panel import InfoPanel
from stacksimulator.view.widgets.stack_view import StackView

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    def __init__(self, presenter: StackPresenter) -> None:
        super().__init__()
        self.presenter: StackPresenter = presenter

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.setMinimumSize(900, 600)
        self.resize(1000, 650)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QHBoxLayout(main_widget)

        # --- LEFT: Controls ---
        self.control_panel = ControlPanel()
        main_layout.addWidget(self.control_panel)

        separator = QFrame()
        separator.setFrameShape(QFrame.VLine)
        separator.setFrameShadow(QFrame.Sunken)
        main_layout.addWidget(separator)

        # --- CENTRE: Stack column ---
        self.stack_view = StackView()
        main_layout.addWidget(self.stack_view, 1)

        # --- RIGHT: Information ---
        self.info_panel = InfoPanel()
        main_layout.addWidget(self.info_panel)

        # --- BOTTOM: Status bar ---
        self.lbl_last_operation = QLabel("")
        self.lbl_status = QLabel("Ready")
        self.lbl_status.setObjectName("statusLabel")

        status_bar = self.statusBar()
        status_bar.addWidget(QLabel("Last Operation:"))
        status_bar.addWidget(self.lbl_last_operation, 1)
        status_bar.addPermanentWidget(self.lbl_status)

        # Deferred redraw of the stack column (presentation only)
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setSingleShot(True)
        self.refresh_timer.timeout.connect(self.refresh_stack_view)

        # --- SIGNAL CONNECTIONS ---
        cp = self.control_panel
        cp.push_requested.connect(self.on_push)
        cp.pop_requested.connect(lambda: self.apply_feedback(self.presenter.pop()))
        cp.peek_requested.connect(lambda: self.apply_feedback(self.presenter.peek()))
        cp.size_requested.connect(lambda: self.apply_feedback(self.presenter.size()))
        cp.is_empty_requested.connect(lambda: self.apply_feedback(self.presenter.is_empty()))
        cp.clear_requested.connect(lambda: self.apply_feedback(self.presenter.clear()))

        # Initial Render
        self.refresh_stack_view()
        self.update_controls()

    # --- SLOTS ---

    def on_push(self, text: str) -> None:
        feedback = self.presenter.push(text)
        if feedback.changed:
            self.control_panel.clear_input()
        self.apply_feedback(feedback)

    def apply_feedback(self, feedback: Feedback) -> None:
        """Show the outcome of a command and bring the widgets up to date."""
        self.set_status(feedback.message, feedback.status)
        if feedback.last_operation is not None:
            self.set_last_operation(feedback.last_operation, feedback.status)

        # Buttons and figures follow the stack immediately, only the column waits
        self.update_controls()

        if feedback.changed:
            self.schedule_refresh(feedback.refresh_delay_ms)

        if feedback.alert is not None:
            self.show_alert(feedback.alert)

    # --- HELPER METHODS ---

    def set_status(self, text: str, status: Status) -> None:
        self.lbl_status.setText(text)
        _set_status_property(self.lbl_status, status)

    def set_last_operation(self, text: str, status: Status) -> None:
        self.lbl_last_operation.setText(text)
        _set_status_property(self.lbl_last_operation, status)

    def update_controls(self) -> None:
        self.control_panel.set_button_states(self.presenter.button_states())
        self.info_panel.update_from_stack(self.presenter.stack)

    def schedule_refresh(self, delay_ms: int) -> None:
        if delay_ms <= 0:
            self.refresh_timer.stop()
            self.refresh_stack_view()
        else:
            self.refresh_timer.start(delay_ms)

    def refresh_stack_view(self) -> None:
        # Always drawn from the presenter's current stack, never a stored snapshot
        self.stack_view.set_model(self.presenter.render_model())

    def show_alert(self, alert: Alert) -> None:
        if alert.status is Status.ERROR:
            QMessageBox.critical(self, alert.title, alert.message)
        elif alert.status is Status.WARNING:
            QMessageBox.warning(self, alert.title, alert.message)
        else:
            QMessageBox.information(self, alert.title, alert.message)


def _set_status_property(label: QLabel, status: Status) -> None:
    # Colour comes from the QLabel[status="..."] rules in styles.qss
    label.setProperty("status", status.value)
    label.style().unpolish(label)
    label.style().polish(label)
