"""
CLI module for Tailwind Scaffold.

This module provides the command-line interface, including the main entry
point that is installed as the ``tailwind-scaffold`` console script.
"""

from .commands import main

__all__ = ["main"]
