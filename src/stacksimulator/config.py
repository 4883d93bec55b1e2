"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (capacity
   limits, animation delays, gauge thresholds) scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the stylesheet) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the Qt stylesheet.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/stacksimulator/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "styles.qss")

# Launcher limits
MIN_CAPACITY: int = 5
MAX_CAPACITY: int = 20
DEFAULT_CAPACITY: int = 10

MIN_RANDOM_COUNT: int = 1
MAX_RANDOM_COUNT: int = 10
DEFAULT_RANDOM_COUNT: int = 5

# Inclusive bounds of the pseudo-random seed values
RANDOM_VALUE_RANGE: tuple[int, int] = (-99, 99)

# Capacity used when the main window is opened without the launcher
STANDALONE_CAPACITY: int = 12

# Delay between an operation and the redraw of the stack column
PUSH_REFRESH_DELAY_MS: int = 100
POP_REFRESH_DELAY_MS: int = 300

# Capacity gauge bands: LOW < 0.7 <= MEDIUM < 0.9 <= HIGH
GAUGE_MEDIUM_THRESHOLD: float = 0.7
GAUGE_HIGH_THRESHOLD: float = 0.9

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
