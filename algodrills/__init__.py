"""Classic algorithm and data-structure exercises: searching, sorting, windows, stacks and trees."""

__version__ = "0.1.0"