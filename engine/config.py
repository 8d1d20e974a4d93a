"""
Configuration constants for cppscan.

Extension classes decide which extractor a file is routed to; the marker
strings are the first lines written by the test and fixture generators,
and must be kept in sync with them.
"""

# Translation units scanned for #include directives
SOURCE_EXTENSIONS: frozenset[str] = frozenset({
    ".cpp",
    ".cc",
    ".cxx",
    ".c",
})

# Header-like files scanned for method prototypes
HEADER_EXTENSIONS: frozenset[str] = frozenset({
    ".h",
    ".hpp",
    ".hxx",
})

# First line of every generated unit test file
GENERATED_TEST_MARKER: str = "// Unit test generated by cppscan. Edits will be overwritten."

# First line of every generated test fixture file
GENERATED_FIXTURE_MARKER: str = "// Test fixture generated by cppscan. Edits will be overwritten."

# Directive recognised by the include extractor
INCLUDE_KEYWORD: str = "#include"

LINE_COMMENT: str = "//"

# Directory names (fnmatch patterns) never descended into during discovery
EXCLUDED_DIRECTORIES: tuple[str, ...] = (
    ".*",
    "build",
    "cmake-build-*",
    "out",
)

# Leading words that start a statement or alias, never a return type
NON_TYPE_KEYWORDS: frozenset[str] = frozenset({
    "case",
    "delete",
    "else",
    "goto",
    "new",
    "return",
    "throw",
    "typedef",
    "using",
})
