"""Reaction I/O in different formats."""

from . import chemkin

__all__ = ["chemkin"]
