"""
Reference index over a parsed tree.

Only level-0 records declare an identity reference (``0 @I1@ INDI``), so a
single pass over the root's children is enough. Lines that merely point
somewhere (``1 HUSB @I1@``) are not indexed.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from gedcom_tree.logging import get_logger
from gedcom_tree.model import IndividualRecord, Record

log = get_logger(__name__)


class ReferenceResolver:
    """
    Maps ``@XREF@`` identifiers to the level-0 record declaring them.

    The first declaration of an identifier wins; later ones are kept in
    ``duplicates`` and logged. The index is read-only once built.
    """

    def __init__(self, root: Record):
        self._index: Dict[str, Record] = {}
        self.duplicates: List[Record] = []

        for record in root.iter_children():
            ref = record.reference
            if not ref:
                continue
            if ref in self._index:
                log.warning(
                    "Duplicate reference %s on line %d (first declared on line %d); keeping the first",
                    ref,
                    record.lineno,
                    self._index[ref].lineno,
                )
                self.duplicates.append(record)
                continue
            self._index[ref] = record

        log.debug("Indexed %d references", len(self._index))

    def resolve(self, reference: Optional[str]) -> Optional[Record]:
        """Return the record declaring ``reference``, or None."""
        if not reference:
            return None
        return self._index.get(reference.strip())

    def resolve_individual(self, reference: Optional[str]) -> Optional[IndividualRecord]:
        """Like ``resolve`` but None unless the target is an individual."""
        record = self.resolve(reference)
        if isinstance(record, IndividualRecord):
            return record
        return None

    def __contains__(self, reference: object) -> bool:
        return isinstance(reference, str) and reference.strip() in self._index

    def __len__(self) -> int:
        return len(self._index)
