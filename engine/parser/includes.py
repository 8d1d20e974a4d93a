"""
Include-Dependency Extractor

Scans a translation unit for #include directives and sorts the included
names into project dependencies (quoted includes) and library dependencies
(angle-bracket includes). Only the file itself is scanned; includes are
recorded, never followed.

Design Decisions:
    - Line oriented: each physical line is normalized and tested on its own
    - The delimiter character is the sole discriminator between the two sets
    - The extension is stripped at the first '.' of the last path component
    - Anything other than '<' or '"' after the keyword is rejected

Limitation: '# include' with a space after the hash is not recognised.
"""

import logging
from pathlib import Path
from typing import Optional

from engine.config import GENERATED_TEST_MARKER, INCLUDE_KEYWORD
from engine.errors import MalformedIncludeError
from engine.models import Dependence, SkipReason
from engine.parser.lines import (
    LineReader,
    class_name_from_path,
    normalize_line,
    skip_reason,
)

logger = logging.getLogger(__name__)

# Opening delimiter -> closing delimiter
_DELIMITERS = {
    "<": ">",
    '"': '"',
}


def parse_include(line: str) -> Optional[tuple[str, bool]]:
    """
    Parse one normalized line as an #include directive.

    Args:
        line: A line already passed through normalize_line

    Returns:
        (name, is_library) for an include line, None for any other line

    Raises:
        MalformedIncludeError: If the directive is not followed by a
            properly delimited, non-empty name

    Example:
        >>> parse_include('#include <vector>')
        ('vector', True)
        >>> parse_include('#include "Bar.h"')
        ('Bar', False)
    """
    if not line.startswith(INCLUDE_KEYWORD):
        return None

    target = line[len(INCLUDE_KEYWORD):].strip()
    if not target or target[0] not in _DELIMITERS:
        raise MalformedIncludeError(
            f"#include must be followed by <name> or \"name\", got: {line!r}"
        )

    opening = target[0]
    closing = target.find(_DELIMITERS[opening], 1)
    if closing == -1:
        raise MalformedIncludeError(f"unterminated #include target: {line!r}")

    # The extension starts at the first dot of the last path component,
    # so relative targets such as "../util/Foo.h" keep their directories.
    name = target[1:closing]
    dot = name.find(".", name.rfind("/") + 1)
    if dot != -1:
        name = name[:dot]
    if not name:
        raise MalformedIncludeError(f"empty #include target: {line!r}")

    return name, opening == "<"


def extract_dependence_from_source(
    source: str,
    class_name: str,
    path: Optional[Path | str] = None,
) -> Optional[Dependence]:
    """
    Build the Dependence record for one translation unit.

    Args:
        source: Full file content
        class_name: Class name to record (normally the file's base name)
        path: File the source came from, used in log and error messages

    Returns:
        The Dependence record, or None if the file is blank or is a
        generated unit test

    Raises:
        MalformedIncludeError: If an #include line is malformed

    Example:
        >>> dep = extract_dependence_from_source('#include "Bar.h"\\n', "Foo")
        >>> sorted(dep.project_dependencies)
        ['Bar']
    """
    label = str(path) if path is not None else class_name

    reason = skip_reason(source, GENERATED_TEST_MARKER)
    if reason is SkipReason.BLANK:
        logger.warning("Blank file read: %s", label)
        return None
    if reason is SkipReason.GENERATED:
        logger.info("Generated unit test identified, skipping: %s", label)
        return None

    project: set[str] = set()
    libraries: set[str] = set()

    reader = LineReader(source)
    for raw_line in reader:
        try:
            parsed = parse_include(normalize_line(raw_line))
        except MalformedIncludeError as e:
            raise MalformedIncludeError(
                e.message, path=label, line_number=reader.line_number
            ) from None
        if parsed is None:
            continue

        name, is_library = parsed
        if is_library:
            libraries.add(name)
        else:
            project.add(name)

    logger.debug(
        "%s: %d project and %d library dependencies",
        label,
        len(project),
        len(libraries),
    )
    return Dependence(
        class_name=class_name,
        project_dependencies=frozenset(project),
        library_dependencies=frozenset(libraries),
    )


def extract_dependence_from_file(file_path: Path | str) -> Optional[Dependence]:
    """
    Read a translation unit and extract its Dependence record.

    The class name is the file name up to its first dot.

    Args:
        file_path: Path to the .cpp (or similar) file

    Returns:
        The Dependence record, or None for blank and generated files

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        MalformedIncludeError: If an #include line is malformed
    """
    file_path = Path(file_path)

    try:
        source = file_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        logger.error("File not found while scanning includes: %s", file_path)
        raise
    except OSError as e:
        logger.error("Error reading %s while scanning includes: %s", file_path, e)
        raise

    return extract_dependence_from_source(
        source,
        class_name=class_name_from_path(file_path),
        path=file_path,
    )
