"""
CLI package for selection_trail.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from selection_trail.cli.app import app, main

__all__ = [
    "app",
    "main",
]
