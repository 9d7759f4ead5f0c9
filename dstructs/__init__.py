"""Classic data structures, sorting, searching and maze exploration in plain Python."""

__version__ = "0.1.0"