"""
Parser module for cppscan.

This module provides the line-oriented extractors for C/C++ files:
include dependencies from translation units and method prototypes from
header-like files.
"""

from engine.parser.braces import skip_body
from engine.parser.declarations import (
    DeclarationMatch,
    extract_methods_from_file,
    extract_methods_from_source,
    match_declaration,
)
from engine.parser.includes import (
    extract_dependence_from_file,
    extract_dependence_from_source,
    parse_include,
)
from engine.parser.lines import (
    LineReader,
    class_name_from_path,
    normalize_line,
    skip_reason,
    split_lines,
)

__all__ = [
    "DeclarationMatch",
    "LineReader",
    "class_name_from_path",
    "extract_dependence_from_file",
    "extract_dependence_from_source",
    "extract_methods_from_file",
    "extract_methods_from_source",
    "match_declaration",
    "normalize_line",
    "parse_include",
    "skip_body",
    "skip_reason",
    "split_lines",
]
