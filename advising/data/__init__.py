"""
Data loading and parsing module.

This package handles all file I/O and profile parsing.
"""

from .loader import DataLoader
from .parser import ProfileParser

__all__ = ["DataLoader", "ProfileParser"]
