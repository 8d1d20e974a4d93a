"""
CLI module for cppscan.

The command-line interface providing scan, graph, and data commands.
"""

from cli.main import app

__all__ = ["app"]
