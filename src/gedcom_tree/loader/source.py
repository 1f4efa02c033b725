# src/gedcom_tree/loader/source.py

"""
Line sources for the tree builder.

    read_lines(path)   -> every line of a GEDCOM file, read up front
    LineCursor(lines)  -> token stream with one-line lookahead
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from gedcom_tree.core.exceptions import SourceUnavailableError
from gedcom_tree.logging import get_logger

from .tokenizer import Token, tokenize_line

log = get_logger(__name__)


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def resolve_input_path(path: Union[str, Path]) -> Path:
    """
    Convert a user-provided path into an absolute, validated file path.

    Raises:
        SourceUnavailableError: the path does not exist or is not a file.
    """
    abs_path = Path(os.path.abspath(path))
    log.debug("Resolving input file: %s", abs_path)

    if not abs_path.exists():
        log.error("Input file does not exist: %s", abs_path)
        raise SourceUnavailableError(f"Input file not found: {abs_path}", path=str(abs_path))

    if not abs_path.is_file():
        log.error("Input path is not a file: %s", abs_path)
        raise SourceUnavailableError(f"Input path is not a file: {abs_path}", path=str(abs_path))

    return abs_path


def read_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a whole GEDCOM file as UTF-8 text (undecodable bytes replaced).

    The file is read completely before parsing starts, so an I/O fault
    never leaves a partial tree behind.

    Raises:
        SourceUnavailableError: the file is missing or cannot be read.
    """
    file_path = resolve_input_path(path)
    try:
        with file_path.open("r", encoding="utf-8", errors="replace") as f:
            lines = list(f)
    except OSError as exc:
        log.error("Could not read %s: %s", file_path, exc)
        raise SourceUnavailableError(f"Could not read {file_path}: {exc}", path=str(file_path)) from exc

    log.info("Loaded file: %s (%d lines)", file_path, len(lines))
    return lines


class LineCursor:
    """
    Token stream over raw lines with one-line lookahead.

    Blank lines are skipped; line numbers count every raw line, starting
    at 1. Lines are only tokenized when first peeked at.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._lineno = 0
        self._pending: Optional[Token] = None

    @property
    def lineno(self) -> int:
        return self._lineno

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at the end."""
        if self._pending is None:
            for raw_line in self._lines:
                self._lineno += 1
                line = _strip_eol(raw_line)
                if not line.strip():
                    continue
                self._pending = tokenize_line(line, lineno=self._lineno)
                break
        return self._pending

    def peek_level(self) -> Optional[int]:
        token = self.peek()
        return token.level if token is not None else None

    def next(self) -> Token:
        """Consume and return the next token."""
        token = self.peek()
        if token is None:
            raise StopIteration
        self._pending = None
        return token

    def __iter__(self) -> "LineCursor":
        return self

    def __next__(self) -> Token:
        return self.next()
