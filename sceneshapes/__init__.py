"""Editable 2D shape items, geometry helpers, input validators, an async logger and host utilities."""

__version__ = "0.1.0"