"""
The MODEL layer contains the stack itself.
It has NO knowledge of the GUI (Qt) or of how the stack is drawn.
"""
