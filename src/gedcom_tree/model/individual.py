# src/gedcom_tree/model/individual.py

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import List, Optional, Set

from gedcom_tree.model.record import Record
from gedcom_tree.tags import BIRTH_TAG, DEATH_TAG, NAME_TAG, PLACE_TAG


def _live(refs: List[weakref.ref]) -> List:
    out = []
    for ref in refs:
        target = ref()
        if target is not None:
            out.append(target)
    return out


def extract_surname(full_name: Optional[str]) -> str:
    """
    Pull the surname out of a ``Given /Surname/`` name payload.

    The trimmed payload has to end with ``/``; the surname is whatever sits
    between the first ``/`` and that trailing one. Anything else yields "".

        "John /Smith/"  -> "Smith"
        "/Smith/"       -> "Smith"
        "John Smith"    -> ""
    """
    if not full_name:
        return ""
    name = full_name.strip()
    if not name.endswith("/"):
        return ""
    begin = name.index("/") + 1
    return name[begin:-1]


def _place_of(record: Record) -> Optional[str]:
    place = record.first_child(PLACE_TAG)
    if place is not None and place.data:
        return place.data
    return None


@dataclass(eq=False, repr=False)
class IndividualRecord(Record):
    """
    An INDI record enriched with relationship edges after linking.

    Edges point at other records owned by the same tree and are held as
    weak references; the tree keeps every record alive.
    """

    surname: str = field(default="", init=False)
    full_name: str = field(default="", init=False)

    _parents: List[weakref.ref] = field(default_factory=list, init=False)
    _offspring: List[weakref.ref] = field(default_factory=list, init=False)
    _spouses: List[weakref.ref] = field(default_factory=list, init=False)
    _families: List[weakref.ref] = field(default_factory=list, init=False)

    # ---------- Derived fields ----------

    def finalize(self) -> None:
        """Derive name fields once the NAME sub-records are attached."""
        name = self.first_child(NAME_TAG)
        self.full_name = (name.data or "") if name is not None else ""
        self.surname = extract_surname(self.full_name)

    @property
    def display_name(self) -> str:
        return " ".join(self.full_name.replace("/", " ").split())

    # ---------- Relationship edges ----------

    @property
    def parents(self) -> List["IndividualRecord"]:
        return _live(self._parents)

    @property
    def offspring(self) -> List["IndividualRecord"]:
        return _live(self._offspring)

    @property
    def spouses(self) -> List["IndividualRecord"]:
        return _live(self._spouses)

    @property
    def families(self) -> List[Record]:
        return _live(self._families)

    def add_family(self, family: Record) -> None:
        self._families.append(weakref.ref(family))

    def add_parents(self, parents: List["IndividualRecord"]) -> None:
        self._parents.extend(weakref.ref(p) for p in parents)

    def add_offspring(self, offspring: List["IndividualRecord"]) -> None:
        self._offspring.extend(weakref.ref(c) for c in offspring)

    def add_spouses(self, spouses: List["IndividualRecord"]) -> None:
        """Add every individual in ``spouses`` except this one."""
        self._spouses.extend(weakref.ref(s) for s in spouses if s is not self)

    # ---------- Read-time queries ----------

    def surname_root(self) -> "IndividualRecord":
        """
        Follow parents sharing this surname back to the earliest one.

        Stops at an individual none of whose parents carry the same
        surname. Already visited individuals are not entered twice, so
        cyclic parent data terminates.
        """
        current = self
        seen: Set[int] = {id(self)}
        while True:
            nxt = None
            for parent in current.parents:
                if parent.surname == current.surname and id(parent) not in seen:
                    nxt = parent
                    break
            if nxt is None:
                return current
            seen.add(id(nxt))
            current = nxt

    def representative_location(self) -> Optional[str]:
        """
        Birth place, else death place, else the first PLAC directly under
        the individual, else None.
        """
        for tag in (BIRTH_TAG, DEATH_TAG):
            for event in self.get_children(tag):
                place = _place_of(event)
                if place is not None:
                    return place
        return _place_of(self)
