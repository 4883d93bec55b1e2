from __future__ import annotations

import os

import pytest

# Widgets must be creatable without a display (CI, ssh sessions)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every GUI test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture()
def alerts(monkeypatch: pytest.MonkeyPatch) -> list:
    """Collect alerts instead of opening modal message boxes."""
    from stacksimulator.view.main_window import MainWindow

    shown: list = []
    monkeypatch.setattr(MainWindow, "show_alert", lambda self, alert: shown.append(alert))
    return shown
