"""
Brace-depth skipper for inline method bodies.

When a declaration is immediately followed by a body, the declaration
extractor hands the rest of the line to skip_body, which consumes lines
until the braces balance. The body's contents are therefore never tested
against the declaration shape.
"""

import logging

from engine.errors import UnterminatedBodyError
from engine.parser.lines import LineReader

logger = logging.getLogger(__name__)


def skip_body(reader: LineReader, fragment: str, path: str | None = None) -> int:
    """
    Consume a balanced-brace span starting with fragment.

    Characters are processed left to right; '{' increments and '}'
    decrements a signed depth counter that starts at zero. The span ends as
    soon as the depth is back at zero after at least one brace has been seen.
    Anything after the closing brace on the same line is discarded.

    Args:
        reader: Reader positioned on the line after the declaration
        fragment: Content of the declaration line after its ')'
        path: File being scanned, for error messages

    Returns:
        Line number on which the body closed, or the last line read when
        input ended before any brace appeared

    Raises:
        UnterminatedBodyError: If input ends with the depth still nonzero

    Example:
        >>> reader = LineReader("  return a + b;\\n}\\nint next();")
        >>> skip_body(reader, " {")
        2
    """
    depth = 0
    start_line = reader.line_number
    text: str | None = fragment

    while text is not None:
        for char in text:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            else:
                continue
            if depth == 0:
                logger.debug(
                    "Skipped body from line %d to line %d", start_line, reader.line_number
                )
                return reader.line_number
        text = reader.readline()

    if depth != 0:
        raise UnterminatedBodyError(
            f"body opened after line {start_line} is never closed (depth {depth} at end of input)",
            path=path,
            line_number=reader.line_number,
        )
    return reader.line_number
