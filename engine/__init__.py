"""
cppscan Engine

Core engine for scanning C/C++ sources: extracting include dependencies
and method prototypes, and building the include graph between classes.
"""

from engine.models import Dependence, Method, ScanResult

__all__ = ["Dependence", "Method", "ScanResult"]
__version__ = "0.1.0"
