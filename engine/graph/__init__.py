"""
Graph module for cppscan.

This module provides NetworkX-based construction of the include graph
between the classes of a C/C++ project.
"""

from engine.graph.builder import (
    IncludeGraph,
    build_include_graph,
)

__all__ = [
    "IncludeGraph",
    "build_include_graph",
]
