"""Two-dimensional rigid-body physics simulation with a pygame viewer."""

__version__ = "0.1.0"