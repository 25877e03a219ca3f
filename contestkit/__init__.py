"""Solutions to classic programming-contest problems as plain Python functions."""

__version__ = "0.1.0"