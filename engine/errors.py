"""
Exception types raised while scanning C/C++ files.

All scanner failures derive from ScanError so callers can catch the whole
family at once. I/O problems are not wrapped: they surface as the
FileNotFoundError/OSError raised by the read itself.
"""

from pathlib import Path
from typing import Optional


class ScanError(ValueError):
    """
    Base class for malformed input and rejected files.

    Attributes:
        path: File being scanned when the error was detected, if known
        line_number: 1-indexed line where the error was detected, if known
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path | str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.message = message
        self.path = str(path) if path is not None else None
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path is None:
            return self.message
        if self.line_number is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line_number}: {self.message}"


class MalformedIncludeError(ScanError):
    """An #include directive is not followed by <name> or "name"."""


class MalformedDeclarationError(ScanError):
    """A parameter list was opened but never closed."""


class UnterminatedBodyError(ScanError):
    """Input ended while an inline body still had open braces."""


class UnsupportedFileError(ScanError):
    """A file with an extension neither extractor accepts was passed in."""


class IncludeCycleError(ScanError):
    """Project dependencies form a cycle, so no build order exists."""
