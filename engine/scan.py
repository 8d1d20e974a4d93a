"""
Batch Driver for cppscan

Dispatches a list of files to the two extractors by extension and merges
their results into a single ScanResult.

Design Decisions:
    - Every extension is checked before any file is read, so an unsupported
      file aborts the batch without partial results
    - Files are scanned sequentially; each is read completely before the
      next is opened
    - Any extraction error propagates immediately and ends the batch
    - Dependence records are merged first-wins by class name

Academic Context:
    Input: Paths to translation units and header-like files
    Transformation: Per-file extraction, then merge
    Output: ScanResult with the ordered methods and the dependency records
"""

import logging
import time
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, Optional

from engine.config import (
    EXCLUDED_DIRECTORIES,
    HEADER_EXTENSIONS,
    SOURCE_EXTENSIONS,
)
from engine.errors import UnsupportedFileError
from engine.models import ScanResult
from engine.parser import extract_dependence_from_file, extract_methods_from_file

logger = logging.getLogger(__name__)


def _check_extensions(
    paths: list[Path],
    source_extensions: Iterable[str],
    header_extensions: Iterable[str],
) -> None:
    """Reject the batch if any path has an extension neither extractor accepts."""
    accepted = set(source_extensions) | set(header_extensions)
    for path in paths:
        if path.suffix not in accepted:
            logger.error("An unexpected file has been passed: %s", path)
            raise UnsupportedFileError(
                f"unsupported file extension {path.suffix or '(none)'!r}; "
                f"expected one of: {', '.join(sorted(accepted))}",
                path=path,
            )


def parse_source_files(
    paths: Iterable[Path | str],
    source_extensions: Iterable[str] = SOURCE_EXTENSIONS,
    header_extensions: Iterable[str] = HEADER_EXTENSIONS,
) -> ScanResult:
    """
    Scan a batch of C/C++ files.

    Translation units go to the include extractor, header-like files to the
    declaration extractor. Blank and generated files are recorded as skipped.

    Args:
        paths: Files to scan, in the order their results should appear
        source_extensions: Extensions routed to the include extractor
        header_extensions: Extensions routed to the declaration extractor

    Returns:
        ScanResult with every method and dependency record found

    Raises:
        UnsupportedFileError: If any path has another extension; no file
            is scanned in that case
        ScanError: If any file is malformed
        OSError: If any file cannot be read

    Example:
        >>> result = parse_source_files(["src/Foo.cpp", "src/Foo.h"])
        >>> print(f"{result.method_count} methods, {result.dependency_count} classes")
    """
    start_time = time.time()
    paths = [Path(p) for p in paths]
    source_extensions = frozenset(source_extensions)
    header_extensions = frozenset(header_extensions)

    _check_extensions(paths, source_extensions, header_extensions)

    result = ScanResult()

    for path in paths:
        if path.suffix in source_extensions:
            dependence = extract_dependence_from_file(path)
            if dependence is None:
                result.skipped.append(str(path))
            else:
                result.add_dependence(dependence)
        else:
            methods = extract_methods_from_file(path)
            if methods is None:
                result.skipped.append(str(path))
            else:
                result.add_methods(methods)
        result.files_scanned += 1

    result.scan_time_seconds = time.time() - start_time
    logger.info(
        "Scanned %d files: %d methods, %d classes with dependencies, %d skipped",
        result.files_scanned,
        result.method_count,
        result.dependency_count,
        result.skipped_count,
    )
    return result


def _is_excluded(relative_path: Path, exclude_patterns: list[str]) -> bool:
    """Check a file against the excluded directory names and the user's globs."""
    for part in relative_path.parts[:-1]:
        if any(fnmatch(part, name) for name in EXCLUDED_DIRECTORIES):
            return True
    return any(relative_path.match(pattern) for pattern in exclude_patterns)


def discover_source_files(
    directory: Path | str,
    exclude_patterns: Optional[Iterable[str]] = None,
    source_extensions: Iterable[str] = SOURCE_EXTENSIONS,
    header_extensions: Iterable[str] = HEADER_EXTENSIONS,
) -> list[Path]:
    """
    Recursively find the files the batch driver accepts.

    Hidden and build directories are always skipped.

    Args:
        directory: Root directory to search
        exclude_patterns: Extra glob patterns, matched against the path
            relative to directory (e.g. ["*_test.cpp", "third_party/*/*"])

    Returns:
        Sorted list of matching file paths

    Raises:
        FileNotFoundError: If the directory doesn't exist
        ValueError: If the path is not a directory
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ValueError(f"Not a directory: {directory}")

    exclude_patterns = list(exclude_patterns or [])
    accepted = set(source_extensions) | set(header_extensions)

    found = []
    for file_path in directory.rglob("*"):
        if not file_path.is_file() or file_path.suffix not in accepted:
            continue
        if _is_excluded(file_path.relative_to(directory), exclude_patterns):
            continue
        found.append(file_path)

    logger.info("Found %d C/C++ files in %s", len(found), directory)
    return sorted(found)


def scan_directory(
    directory: Path | str,
    exclude_patterns: Optional[Iterable[str]] = None,
) -> ScanResult:
    """
    Discover and scan every supported file under a directory.

    Example:
        >>> result = scan_directory("./my_project")
        >>> for method in result.methods:
        ...     print(method)
    """
    files = discover_source_files(directory, exclude_patterns)
    if not files:
        logger.warning("No C/C++ files found in %s", directory)
    return parse_source_files(files)
