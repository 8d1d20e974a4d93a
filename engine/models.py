"""
Core Data Models for cppscan

This module defines the canonical data structures used throughout the system:
- Method: One prototype discovered in a header-like file
- Dependence: The include relationships of one translation unit
- ScanResult: Accumulated output of a batch scan

These models are designed to be:
- Produced only by the extractors
- Free of file handles and scanning state
- Handed by reference to the test and build-file generators
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class SkipReason(Enum):
    """
    Why an extractor returned no result for a file.

    States:
        BLANK: The file has no content at all.

        GENERATED: The first line is one of the generator marker lines,
               so the file is this tool's own output.
    """

    BLANK = "blank"
    GENERATED = "generated"


@dataclass
class Method:
    """
    Represents one method prototype discovered in a header-like file.

    Attributes:
        class_name: Base name of the declaring file, up to its first dot
        return_type: First token of the declaration
        method_name: Token immediately before the opening parenthesis
        param_types: Type token of each declared parameter, in order
        included_in_test_suite: Whether the test generator should emit a stub
        input_data_file: CSV file supplying parameter values, if any

    Invariants:
        - param_types is empty (not [""]) for an empty parameter list
        - Only the two trailing flags are changed after extraction
    """

    class_name: str
    return_type: str
    method_name: str
    param_types: tuple[str, ...] = ()
    included_in_test_suite: bool = True
    input_data_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Store parameter types as an immutable copy."""
        self.param_types = tuple(self.param_types)

    @property
    def signature(self) -> str:
        """Return the prototype without its class, e.g. 'int sum(int, int)'."""
        return f"{self.return_type} {self.method_name}({', '.join(self.param_types)})"

    def __str__(self) -> str:
        return f"{self.class_name}: {self.signature}"


@dataclass(frozen=True, eq=False)
class Dependence:
    """
    Include relationships of a single translation unit.

    Attributes:
        class_name: Base name of the source file, up to its first dot
        project_dependencies: Names from quoted includes, extension stripped
        library_dependencies: Names from angle-bracket includes, extension stripped

    Note:
        Equality and hashing use class_name only. Two records for the same
        class are duplicates whatever their dependency contents.
    """

    class_name: str
    project_dependencies: frozenset[str] = frozenset()
    library_dependencies: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_dependencies", frozenset(self.project_dependencies))
        object.__setattr__(self, "library_dependencies", frozenset(self.library_dependencies))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dependence):
            return NotImplemented
        return self.class_name == other.class_name

    def __hash__(self) -> int:
        return hash(self.class_name)

    def __str__(self) -> str:
        project = ", ".join(sorted(self.project_dependencies))
        libraries = ", ".join(sorted(self.library_dependencies))
        return f"{self.class_name}: project=[{project}] libraries=[{libraries}]"


@dataclass
class ScanResult:
    """
    Result of scanning a batch of files.

    Aggregates the records produced by both extractors. Dependencies are
    keyed by class name and the first record for a name wins: a later file
    with the same base name is dropped, not merged.

    Attributes:
        methods: All Methods discovered, in file and line order
        dependencies: Dependence records keyed by class name
        files_scanned: Number of files read to completion
        skipped: Files that were blank or generated
        scan_time_seconds: Total time taken for the scan
    """

    methods: list[Method] = field(default_factory=list)
    dependencies: dict[str, Dependence] = field(default_factory=dict)
    files_scanned: int = 0
    skipped: list[str] = field(default_factory=list)
    scan_time_seconds: float = 0.0

    def add_methods(self, methods: Iterable[Method]) -> None:
        """Append methods in the order given."""
        self.methods.extend(methods)

    def add_dependence(self, dependence: Dependence) -> bool:
        """
        Record a Dependence unless its class name is already present.

        Returns:
            True if the record was stored, False if it was a duplicate
        """
        if dependence.class_name in self.dependencies:
            logger.info(
                "Duplicate class name %s, keeping the first dependency record",
                dependence.class_name,
            )
            return False
        self.dependencies[dependence.class_name] = dependence
        return True

    def dependency_set(self) -> set[Dependence]:
        """Return the dependencies as the set handed to the build-file writer."""
        return set(self.dependencies.values())

    @property
    def method_count(self) -> int:
        """Total number of methods discovered."""
        return len(self.methods)

    @property
    def dependency_count(self) -> int:
        """Number of distinct classes with dependency records."""
        return len(self.dependencies)

    @property
    def skipped_count(self) -> int:
        """Number of files skipped as blank or generated."""
        return len(self.skipped)
