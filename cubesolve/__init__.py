"""Rubik's Cube search solvers, a corner pattern database and sticker colour classification."""

__version__ = "0.1.0"