"""
Record types of the parsed tree.

    from gedcom_tree.model import Record, IndividualRecord, make_root
"""

from __future__ import annotations

from .record import Record, make_root
from .individual import IndividualRecord, extract_surname

__all__ = [
    "Record",
    "IndividualRecord",
    "make_root",
    "extract_surname",
]
