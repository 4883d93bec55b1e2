"""
The VIEW layer holds every PySide6 widget of the simulator.
It reads from the presenter and never mutates the stack itself.
"""
