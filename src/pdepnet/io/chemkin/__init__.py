"""Functions for writing CHEMKIN-formatted files."""

from . import write

__all__ = ["write"]
