# src/gedcom_tree/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gedcom_tree.core.exceptions import MalformedLineError
from gedcom_tree.model import IndividualRecord, Record
from gedcom_tree.tags import is_individual, is_reference


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line, split into its fields.

    Attributes:
        lineno: 1-based line number in the original file.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        reference: Optional ``@XREF@`` token found before the tag.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME".
        data: The payload after the tag, or None for two-token lines.
        raw: The trimmed line.
    """
    lineno: int
    level: int
    reference: Optional[str]
    tag: str
    data: Optional[str]
    raw: str


def rest_from_token(line: str, index: int) -> str:
    """
    Return the text after the ``index``-th single-space boundary.

    Positional, so runs of spaces inside the payload survive:

        rest_from_token("1 NOTE a  b", 1) -> "a  b"
        rest_from_token("0 @I1@ INDI", 2) -> ""
    """
    pos = line.find(" ")
    for _ in range(index):
        if pos < 0:
            break
        pos = line.find(" ", pos + 1)
    return line[pos + 1:] if pos >= 0 else ""


def parse_level(token: str, *, lineno: int = 0, line: Optional[str] = None) -> int:
    """Parse a level token; it must be an unsigned ASCII integer."""
    if not (token.isascii() and token.isdigit()):
        raise MalformedLineError(
            f"Line {lineno}: level is not a non-negative integer -> {token!r} in {line!r}",
            lineno=lineno,
            line=line,
        )
    return int(token)


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Split one GEDCOM line into a Token.

    Layout:
        <level> [<reference>] <tag> [<data>]

    Examples:
        "0 HEAD"                  -> level 0, tag HEAD, data None
        "0 @I1@ INDI"             -> level 0, reference @I1@, tag INDI, data ""
        "1 NAME John /Doe/"       -> level 1, tag NAME, data "John /Doe/"
        "1 HUSB @I1@"             -> level 1, tag HUSB, data "@I1@"

    Raises:
        MalformedLineError: bad level token, fewer than two tokens, or an
            empty tag.
    """
    raw = line
    if lineno <= 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")
    raw = raw.strip()

    toks = raw.split(" ")
    if len(toks) < 2:
        raise MalformedLineError(
            f"Line {lineno}: expected a level and a tag -> {raw!r}",
            lineno=lineno,
            line=raw,
        )

    level = parse_level(toks[0], lineno=lineno, line=raw)

    reference: Optional[str] = None
    if len(toks) == 2:
        tag, data = toks[1], None
    elif is_reference(toks[1]):
        reference, tag, data = toks[1], toks[2], rest_from_token(raw, 2)
    else:
        tag, data = toks[1], rest_from_token(raw, 1)

    if not tag:
        raise MalformedLineError(
            f"Line {lineno}: empty tag -> {raw!r}",
            lineno=lineno,
            line=raw,
        )

    return Token(
        lineno=lineno,
        level=level,
        reference=reference,
        tag=tag,
        data=data,
        raw=raw,
    )


def record_from_token(token: Token) -> Record:
    """
    Build a childless Record from a Token.

    A reference-bearing INDI line becomes an IndividualRecord.
    """
    cls = Record
    if token.reference is not None and is_individual(token.tag):
        cls = IndividualRecord
    return cls(
        level=token.level,
        tag=token.tag,
        reference=token.reference,
        data=token.data,
        lineno=token.lineno,
    )


def parse_line(line: str, lineno: int = 0) -> Record:
    """Parse one trimmed, non-empty line into a Record with no children."""
    return record_from_token(tokenize_line(line, lineno=lineno))
