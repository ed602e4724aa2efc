"""Paco Ŝako board state, action machine and notations."""

__version__ = "0.1.0"
