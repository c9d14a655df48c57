"""A small Tk code editor with keyword highlighting, colour themes and a command terminal."""

__version__ = "0.1.0"