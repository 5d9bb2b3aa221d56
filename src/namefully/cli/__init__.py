"""
CLI package for namefully.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from namefully.cli.app import app, main

__all__ = [
    "app",
    "main",
]
