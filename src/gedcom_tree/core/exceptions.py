from __future__ import annotations

from typing import Optional


class GedcomTreeError(Exception):
    """Base exception for parse and pipeline failures."""


class MalformedLineError(GedcomTreeError, ValueError):
    """
    Raised when a line cannot be parsed, or when its level breaks the
    tree structure. Fatal to the current parse.
    """

    def __init__(self, message: str, *, lineno: int = 0, line: Optional[str] = None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line


class SourceUnavailableError(GedcomTreeError, OSError):
    """Raised when the input cannot be opened or read. No tree is produced."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ParseExecutionError(GedcomTreeError):
    """Raised when the pipeline fails for a reason other than bad input."""


class UnresolvedReferenceWarning(UserWarning):
    """A family member reference that did not resolve to an individual."""
