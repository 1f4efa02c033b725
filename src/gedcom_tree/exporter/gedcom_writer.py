"""
gedcom_writer.py
Reprint a record tree in the GEDCOM line format.

Level-0 records carrying a reference print it before the tag
(``0 @I1@ INDI``); every other record prints the tag first and the
reference, if any, after it (``1 TAG @X@ data``).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from gedcom_tree.logging import get_logger
from gedcom_tree.model import Record

log = get_logger("gedcom_writer")


def format_record(record: Record) -> str:
    """Format one record (without its children) as a single line."""
    if record.level == 0 and record.reference is not None:
        parts = [str(record.level), record.reference, record.tag]
    else:
        parts = [str(record.level), record.tag]
        if record.reference is not None:
            parts.append(record.reference)

    line = " ".join(parts)
    if record.data:
        line = f"{line} {record.data}"
    return line


def _collect(record: Record, out: List[str]) -> None:
    if not record.is_root:
        out.append(format_record(record))
    for child in record.iter_children():
        _collect(child, out)


def write_gedcom(record: Record) -> str:
    """
    Format ``record`` and its subtree, children in input order.

    The synthetic root is not printed itself, only its descendants.
    """
    lines: List[str] = []
    _collect(record, lines)
    return "\n".join(lines)


def export_gedcom(tree, output_path: Union[str, Path]) -> Path:
    """Write a parsed tree back out as a GEDCOM file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    text = write_gedcom(tree.root)
    path.write_text(text + "\n" if text else "", encoding="utf-8")

    log.info("GEDCOM written to %s", path)
    return path
