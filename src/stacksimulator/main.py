"""
Application Initialization
==========================
This module wires the launcher, the stack and the main window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Shows the Launcher dialog and reads the chosen configuration.
2. Builds the stack (Model) and its Presenter (Controller).
3. Passes the Presenter into the Main Window (View).
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from PySide6.QtWidgets import QDialog

from stacksimulator.logging_config import setup_logging
from stacksimulator.app.application import create_app
from stacksimulator.controller.launcher import build_stack
from stacksimulator.controller.presenter import StackPresenter
from stacksimulator.view.dialogs.launcher_dialog import LauncherDialog
from stacksimulator.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see every peek/size query as well
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Pre-flight configuration
    launcher = LauncherDialog()
    if launcher.exec() != QDialog.Accepted:
        logger.info("Launcher closed without starting the simulator.")
        return 0

    config = launcher.config()

    # 4. Initialize the Model and the Presenter
    presenter = StackPresenter(build_stack(config))

    # 5. Initialize the Main Window, passing the presenter
    window = MainWindow(presenter)
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
