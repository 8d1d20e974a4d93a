"""
Line-level helpers shared by both extractors.

Provides the line normalizer (comment stripping and trimming), a reader that
hands out physical lines one at a time while tracking the line number, and
the blank/generated-file check applied to the first line of every file.
"""

from pathlib import Path
from typing import Optional

from engine.config import LINE_COMMENT
from engine.models import SkipReason


def normalize_line(line: str) -> str:
    """
    Strip a trailing line comment and surrounding whitespace.

    Block comments are left alone; only the first '//' is honoured.

    Example:
        >>> normalize_line('  #include "Foo.h" // local header\\n')
        '#include "Foo.h"'
    """
    index = line.find(LINE_COMMENT)
    if index != -1:
        line = line[:index]
    return line.strip()


def split_lines(source: str) -> list[str]:
    """
    Split source into physical lines on '\\n' only.

    A trailing '\\r' is dropped from each line and a final newline does not
    start an extra empty line. Other characters that str.splitlines() treats
    as breaks (form feed, '\\x85', '\\u2028', ...) stay inside the line, so line
    numbers agree with an editor's.

    Example:
        >>> split_lines("int a();\\r\\nint\\fb();\\n")
        ['int a();', 'int\\x0cb();']
    """
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineReader:
    """
    Sequential reader over the physical lines of a source text.

    The extractors and the brace skipper share one reader, so a body consumed
    by the skipper is never seen again by the declaration scan.

    Attributes:
        line_number: 1-indexed number of the last line returned, 0 before
            the first read
    """

    def __init__(self, source: str) -> None:
        self._lines = split_lines(source)
        self._index = 0

    @property
    def line_number(self) -> int:
        return self._index

    def readline(self) -> Optional[str]:
        """Return the next physical line without its newline, or None at end of input."""
        if self._index >= len(self._lines):
            return None
        line = self._lines[self._index]
        self._index += 1
        return line

    def __iter__(self):
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def first_line(source: str) -> Optional[str]:
    """Return the first physical line of source, or None if source is empty."""
    if not source:
        return None
    return split_lines(source)[0]


def skip_reason(source: str, marker: str) -> Optional[SkipReason]:
    """
    Decide whether a file should be skipped before scanning it.

    Args:
        source: Full file content
        marker: Generator marker line that identifies the file as output

    Returns:
        SkipReason.BLANK for empty content, SkipReason.GENERATED when the
        first line equals the marker exactly, None otherwise
    """
    line = first_line(source)
    if line is None:
        return SkipReason.BLANK
    if line == marker:
        return SkipReason.GENERATED
    return None


def class_name_from_path(path: Path | str) -> str:
    """
    Derive the class name from a file name.

    Everything from the first dot onward is dropped, so 'Foo.test.h'
    gives 'Foo'.
    """
    name = Path(path).name
    return name.split(".", 1)[0]
