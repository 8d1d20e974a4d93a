"""
Declaration Extractor

Scans header-like files for method prototypes and turns each one into a
Method record. There is no tokenizer or grammar: lines are joined until
their parameter list closes, then tested against a fixed declaration shape.

Key Components:
    - match_declaration: Shape matcher for one logical line
    - extract_methods_from_source: Line scan over a whole file
    - extract_methods_from_file: File-based entry point

Declaration Shape:
    <return-type> <method-name> ( <param>, <param>, ... ) <anything>

    Exactly two whitespace-separated tokens precede the '('. The first token
    may not be a statement keyword such as 'return' or 'typedef', and the
    closing ')' may not be followed by another '('. Each parameter
    is a type token optionally followed by a name. A declaration whose
    trailing content is not terminated by ';' before any '{' is a
    definition, and its body is consumed by the brace skipper before
    scanning resumes.

Limitations:
    - Qualifiers before the return type ('static int f()') do not match
    - Default arguments containing ',' or '(' give ill-formed parameters
    - Function pointer parameters do not match
    - Bodies of definitions that do not match (constructors, destructors,
      qualified members) are not skipped; their statements are only
      filtered by the keyword rule
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from engine.config import GENERATED_FIXTURE_MARKER, NON_TYPE_KEYWORDS
from engine.errors import MalformedDeclarationError
from engine.models import Method, SkipReason
from engine.parser.braces import skip_body
from engine.parser.lines import (
    LineReader,
    class_name_from_path,
    normalize_line,
    skip_reason,
)

logger = logging.getLogger(__name__)


@dataclass
class DeclarationMatch:
    """
    Pieces of a logical line that matched the declaration shape.

    Attributes:
        return_type: First token of the line
        method_name: Token immediately before '('
        param_types: Leading token of each non-empty parameter fragment
        trailing: Everything after the closing ')'
    """

    return_type: str
    method_name: str
    param_types: tuple[str, ...]
    trailing: str

    @property
    def has_body(self) -> bool:
        """
        True when a body follows the declaration.

        That is the case when the trailing content has no ';', or opens a
        '{' before its first ';' (a one-line body such as '{ return x; }').
        """
        semicolon = self.trailing.find(";")
        if semicolon == -1:
            return True
        brace = self.trailing.find("{")
        return brace != -1 and brace < semicolon


def match_declaration(line: str) -> Optional[DeclarationMatch]:
    """
    Test one logical line against the declaration shape.

    Args:
        line: A normalized, fully joined line

    Returns:
        The matched pieces, or None if the line is not a declaration

    Example:
        >>> m = match_declaration("int sum(int a, int b);")
        >>> (m.return_type, m.method_name, m.param_types)
        ('int', 'sum', ('int', 'int'))
        >>> match_declaration("class Foo {") is None
        True
    """
    if not line or line.startswith("#"):
        return None

    open_paren = line.find("(")
    if open_paren == -1:
        return None

    head = line[:open_paren].split()
    if len(head) != 2:
        return None
    return_type, method_name = head
    if return_type in NON_TYPE_KEYWORDS:
        return None

    close_paren = line.find(")", open_paren + 1)
    if close_paren == -1:
        return None

    params = line[open_paren + 1:close_paren]
    if "(" in params:
        return None

    trailing = line[close_paren + 1:]
    if trailing.lstrip().startswith("("):
        return None

    param_types = []
    for fragment in params.split(","):
        tokens = fragment.split()
        if tokens:
            # The parameter name, if any, is discarded
            param_types.append(tokens[0])

    return DeclarationMatch(
        return_type=return_type,
        method_name=method_name,
        param_types=tuple(param_types),
        trailing=trailing,
    )


def _read_logical_line(reader: LineReader, line: str, label: str) -> str:
    """
    Join physical lines until an opened parameter list closes.

    Raises:
        MalformedDeclarationError: If input ends before the ')'
    """
    line = normalize_line(line)
    start_line = reader.line_number
    while "(" in line and ")" not in line:
        continuation = reader.readline()
        if continuation is None:
            raise MalformedDeclarationError(
                f"parameter list opened on line {start_line} is never closed",
                path=label,
                line_number=reader.line_number,
            )
        line = f"{line} {normalize_line(continuation)}"
    return line


def extract_methods_from_source(
    source: str,
    class_name: str,
    path: Optional[Path | str] = None,
) -> Optional[list[Method]]:
    """
    Extract every method prototype from a header-like source text.

    Both prototypes and definitions are recorded. A definition's body is
    skipped so that statements inside it are never mistaken for
    declarations.

    Args:
        source: Full file content
        class_name: Class name recorded on every Method
        path: File the source came from, used in log and error messages

    Returns:
        Methods in declaration order (possibly empty), or None if the file
        is blank or is a generated test fixture

    Raises:
        MalformedDeclarationError: If a parameter list never closes
        UnterminatedBodyError: If an inline body never closes

    Example:
        >>> methods = extract_methods_from_source("void reset();\\n", "Counter")
        >>> str(methods[0])
        'Counter: void reset()'
    """
    label = str(path) if path is not None else class_name

    reason = skip_reason(source, GENERATED_FIXTURE_MARKER)
    if reason is SkipReason.BLANK:
        logger.warning("Blank file read: %s", label)
        return None
    if reason is SkipReason.GENERATED:
        logger.info("Generated test fixture identified, skipping: %s", label)
        return None

    methods: list[Method] = []
    reader = LineReader(source)

    line = reader.readline()
    while line is not None:
        logical = _read_logical_line(reader, line, label)
        match = match_declaration(logical)
        if match is not None:
            method = Method(
                class_name=class_name,
                return_type=match.return_type,
                method_name=match.method_name,
                param_types=match.param_types,
            )
            methods.append(method)
            logger.debug("%s:%d: found %s", label, reader.line_number, method.signature)

            if match.has_body:
                skip_body(reader, match.trailing, path=label)

        line = reader.readline()

    logger.debug("%s: %d methods", label, len(methods))
    return methods


def extract_methods_from_file(file_path: Path | str) -> Optional[list[Method]]:
    """
    Read a header-like file and extract its method prototypes.

    The class name is the file name up to its first dot.

    Args:
        file_path: Path to the .h (or similar) file

    Returns:
        Methods in declaration order, or None for blank and generated files

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        MalformedDeclarationError: If a parameter list never closes
        UnterminatedBodyError: If an inline body never closes

    Example:
        >>> for method in extract_methods_from_file("Calculator.h"):
        ...     print(method)
    """
    file_path = Path(file_path)

    try:
        source = file_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        logger.error("File not found while scanning declarations: %s", file_path)
        raise
    except OSError as e:
        logger.error("Error reading %s while scanning declarations: %s", file_path, e)
        raise

    return extract_methods_from_source(
        source,
        class_name=class_name_from_path(file_path),
        path=file_path,
    )
