# src/gedcom_tree/model/record.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from gedcom_tree.tags import CONC_TAG, CONT_TAG, ROOT_TAG


@dataclass(eq=False, repr=False)
class Record:
    """
    A single node of the parsed GEDCOM tree.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures,
            -1 for the synthetic root).
        tag: The GEDCOM tag (HEAD, INDI, FAM, NAME, PLAC, ...).
        reference: Optional ``@XREF@`` token. On level-0 records this is the
            record's identity; elsewhere it is whatever the line carried.
        data: Optional free-text payload, verbatim from the line.
        lineno: 1-based line number in the source (0 when built in memory).
        children: Child records keyed by tag, each list in input order.

    Records compare by identity. Children are owned exclusively by their
    parent.
    """

    level: int
    tag: str
    reference: Optional[str] = None
    data: Optional[str] = None
    lineno: int = 0
    children: Dict[str, List["Record"]] = field(default_factory=dict, repr=False)
    _ordered: List["Record"] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._ordered = [c for nodes in self.children.values() for c in nodes]

    # ---------- Structure ----------

    @property
    def is_root(self) -> bool:
        return self.level < 0

    def add_child(self, child: "Record") -> None:
        self.children.setdefault(child.tag, []).append(child)
        self._ordered.append(child)

    def get_children(self, tag: str) -> List["Record"]:
        """Return all direct children with a given tag (empty list if none)."""
        return list(self.children.get(tag, ()))

    def first_child(self, tag: str) -> Optional["Record"]:
        """Return the first direct child with this tag, or None."""
        nodes = self.children.get(tag)
        return nodes[0] if nodes else None

    def iter_children(self) -> Iterator["Record"]:
        """Yield all direct children in input order, regardless of tag."""
        return iter(self._ordered)

    def iter_subtree(self) -> Iterator["Record"]:
        """Yield this record and all descendants in depth-first order."""
        yield self
        for child in self._ordered:
            yield from child.iter_subtree()

    def finalize(self) -> None:
        """
        Called by the tree builder once every child of this record has
        been attached. Plain records have nothing to derive.
        """

    # ---------- Payload ----------

    def text(self) -> str:
        """
        Return the payload with CONC/CONT continuation children folded in.

        CONC appends directly, CONT appends after a newline. The tree is
        not modified.
        """
        value = self.data or ""
        for child in self._ordered:
            if child.tag == CONC_TAG:
                value += child.data or ""
            elif child.tag == CONT_TAG:
                value += "\n" + (child.data or "")
        return value

    def __repr__(self) -> str:
        ref = f" {self.reference}" if self.reference else ""
        return f"<{type(self).__name__} {self.level}{ref} {self.tag}: {self.data!r}>"


def make_root() -> Record:
    """Synthetic root that owns every level-0 record."""
    return Record(level=-1, tag=ROOT_TAG)
