"""
Command Line Interfaces

Command-line tools for inspecting the import property catalog and trying
out the value parsers.
"""

from .main import main

__all__ = ["main"]
