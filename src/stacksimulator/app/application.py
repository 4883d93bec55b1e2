from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

from stacksimulator.config import STYLESHEET_PATH

logger = logging.getLogger(__name__)

ORG_ID = "stacksimulator"
APP_ID = "stack-simulator"

VISIBLE_APP_NAME = "Stack Operation Simulator"


def load_stylesheet(path: str = STYLESHEET_PATH) -> str:
    """Read the Qt stylesheet, or return an empty string if it is missing."""
    if not os.path.isfile(path):
        logger.warning(f"Stylesheet not found at {path}, using the default Qt look.")
        return ""
    with open(path, encoding="utf-8") as f:
        return f.read()


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or reuse a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setStyleSheet(load_stylesheet())

    return app
