"""Masterchess — two-player, same-device chess."""

__version__ = "0.1.0"
