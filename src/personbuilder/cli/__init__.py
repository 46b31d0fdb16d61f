"""
Command-line interface for person-builder.

Provides commands that assemble a Person with each builder and print it.
"""

from .main import app, main

__all__ = ["main", "app"]
