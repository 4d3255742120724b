"""Interfaces Layer: Command line entry points.

This layer contains:
- cli.py: Command-line interface
"""

from trade_analytics.interfaces.cli import main as cli_main

__all__ = ["cli_main"]
