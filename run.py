"""
Development launcher for the Stack Operation Simulator.

Runs the simulator straight from a source checkout, without installing
the package first:

    $ python run.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

# Windows groups taskbar icons by this id instead of by python.exe
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("StackOperationSimulator.1")
except (AttributeError, ImportError):
    pass

from stacksimulator.main import main

if __name__ == "__main__":
    sys.exit(main())
