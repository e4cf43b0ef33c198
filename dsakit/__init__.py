"""Classic data-structure and algorithm solutions as plain Python functions."""

__version__ = "0.1.0"