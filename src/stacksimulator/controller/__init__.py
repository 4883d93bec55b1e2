"""
The CONTROLLER layer sits between the widgets and the stack.
It interprets user commands and prepares everything the view draws.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
