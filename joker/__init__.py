"""Joker - joke or quote content endpoint."""

__version__ = "0.1.0"
