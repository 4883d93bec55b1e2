"""Stack Operation Simulator: an interactive visualisation of a bounded LIFO stack."""

__version__ = "1.0.0"
