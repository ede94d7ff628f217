"""
CLI module for symbolstore.

This module provides command-line interface for computing symbol package
storage names and resolving their downloads.
"""

from symbolstore.cli.commands import main

__all__ = ["main"]
