"""
Modal Launcher Dialog
"""
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSpinBox, QRadioButton,
    QButtonGroup, QGroupBox, QFormLayout, QWidget
)
from PySide6.QtCore import Qt

from stacksimulator.config import (
    MIN_CAPACITY, MAX_CAPACITY, DEFAULT_CAPACITY,
    MIN_RANDOM_COUNT, MAX_RANDOM_COUNT, DEFAULT_RANDOM_COUNT,
)
from stacksimulator.controller.launcher import LaunchConfig, DataMode


class LauncherDialog(QDialog):
    """Pick the stack capacity and the initial contents before the simulator opens."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Stack Simulator Launcher")
        self.setMinimumWidth(420)

        layout = QVBoxLayout(self)

        title = QLabel("Stack Operation Simulator")
        title.setObjectName("launcherTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        description = QLabel("This application simulates the operations of a Stack data structure.")
        description.setWordWrap(True)
        description.setAlignment(Qt.AlignCenter)
        layout.addWidget(description)

        # --- Configuration ---
        grp = QGroupBox("Configuration")
        form = QFormLayout(grp)

        self.spin_capacity = QSpinBox()
        self.spin_capacity.setRange(MIN_CAPACITY, MAX_CAPACITY)
        self.spin_capacity.setValue(DEFAULT_CAPACITY)
        form.addRow("Maximum Stack Size:", self.spin_capacity)

        self.radio_empty = QRadioButton("Empty Stack")
        self.radio_random = QRadioButton("Random Data")
        self.radio_empty.setChecked(True)

        # Keep a reference, otherwise the group is garbage collected
        self.mode_group = QButtonGroup(self)
        self.mode_group.addButton(self.radio_empty)
        self.mode_group.addButton(self.radio_random)

        radio_box = QHBoxLayout()
        radio_box.addWidget(self.radio_empty)
        radio_box.addWidget(self.radio_random)
        form.addRow("Initial Data:", radio_box)

        self.spin_random_count = QSpinBox()
        self.spin_random_count.setRange(MIN_RANDOM_COUNT, MAX_RANDOM_COUNT)
        self.spin_random_count.setValue(DEFAULT_RANDOM_COUNT)
        self.spin_random_count.setEnabled(False)  # Only used with random data
        form.addRow("Number of Elements:", self.spin_random_count)

        self.radio_random.toggled.connect(self.spin_random_count.setEnabled)

        layout.addWidget(grp)

        # --- Actions ---
        buttons = QHBoxLayout()
        buttons.addStretch()

        self.btn_start = QPushButton("Start Simulator")
        self.btn_start.setObjectName("launcherStart")
        self.btn_start.setDefault(True)
        self.btn_start.clicked.connect(self.accept)
        buttons.addWidget(self.btn_start)

        self.btn_exit = QPushButton("Exit")
        self.btn_exit.setObjectName("launcherExit")
        self.btn_exit.clicked.connect(self.reject)
        buttons.addWidget(self.btn_exit)

        buttons.addStretch()
        layout.addLayout(buttons)

    def mode(self) -> DataMode:
        return DataMode.RANDOM if self.radio_random.isChecked() else DataMode.EMPTY

    def config(self) -> LaunchConfig:
        return LaunchConfig(
            capacity=self.spin_capacity.value(),
            mode=self.mode(),
            random_count=self.spin_random_count.value(),
        )
