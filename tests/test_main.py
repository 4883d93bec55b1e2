import logging

import pytest
from PySide6.QtWidgets import QDialog

from stacksimulator import main as main_module
from stacksimulator.controller.launcher import LaunchConfig, DataMode


class _FakeApp:
    def __init__(self):
        self.exec_calls = 0

    def exec(self):
        self.exec_calls += 1
        return 0


class _FakeLauncher:
    result = QDialog.Accepted
    launch_config = LaunchConfig()

    def exec(self):
        return self.result

    def config(self):
        return self.launch_config


class _FakeWindow:
    created: list = []

    def __init__(self, presenter):
        self.presenter = presenter
        self.shown = False
        _FakeWindow.created.append(self)

    def show(self):
        self.shown = True


@pytest.fixture()
def fake_app(monkeypatch):
    app = _FakeApp()
    _FakeWindow.created = []
    monkeypatch.setattr(main_module, "create_app", lambda: app)
    monkeypatch.setattr(main_module, "MainWindow", _FakeWindow)
    monkeypatch.setattr(main_module, "setup_logging", lambda level=logging.INFO: None)
    return app


def test_exit_from_launcher_returns_success(monkeypatch, fake_app):
    launcher = _FakeLauncher()
    launcher.result = QDialog.Rejected
    monkeypatch.setattr(main_module, "LauncherDialog", lambda: launcher)

    assert main_module.main() == 0
    assert fake_app.exec_calls == 0
    assert _FakeWindow.created == []


def test_start_opens_window_with_configured_stack(monkeypatch, fake_app):
    launcher = _FakeLauncher()
    launcher.launch_config = LaunchConfig(capacity=6, mode=DataMode.RANDOM, random_count=3)
    monkeypatch.setattr(main_module, "LauncherDialog", lambda: launcher)

    assert main_module.main() == 0
    assert fake_app.exec_calls == 1

    (window,) = _FakeWindow.created
    assert window.shown
    assert window.presenter.stack.capacity == 6
    assert window.presenter.stack.size() == 3
