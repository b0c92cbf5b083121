"""Command-line interface module for XML Structure.

This module provides the xml2struct tool, converting XML files into their
structure representation as JSON.
"""

from .main import main

__all__ = ["main"]
