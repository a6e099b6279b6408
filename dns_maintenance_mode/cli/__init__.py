"""
Command-line interface components.

This package contains the CLI entry point for the maintenance mode toggle.
"""

from .main import main

__all__ = ["main"]
