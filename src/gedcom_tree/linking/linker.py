from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from gedcom_tree.config import get_config
from gedcom_tree.core.exceptions import UnresolvedReferenceWarning
from gedcom_tree.logging import get_logger
from gedcom_tree.model import IndividualRecord, Record
from gedcom_tree.tags import FAMILY_TAG, OFFSPRING_ROLES, PARENT_ROLES, is_reference

from .resolver import ReferenceResolver

log = get_logger(__name__)

MISSING = "missing"
NOT_INDIVIDUAL = "not-individual"
NOT_A_REFERENCE = "not-a-reference"


@dataclass(frozen=True)
class SkippedReference:
    """A family member slot that contributed no edge."""
    family: Optional[str]
    role: str
    reference: Optional[str]
    reason: str
    lineno: int = 0


@dataclass
class LinkReport:
    families: int = 0
    parent_edges: int = 0
    child_edges: int = 0
    spouse_edges: int = 0
    skipped: List[SkippedReference] = field(default_factory=list)


class Linker:
    """
    Turns HUSB/WIFE/CHIL references of every FAM record into edges between
    individual records.

    For each family, every resolved parent gains the family, all resolved
    offspring and every other resolved parent as spouse; every resolved
    offspring gains the family and all resolved parents. Members are taken
    in input order. Slots that do not resolve to an individual are skipped
    and reported in ``LinkReport.skipped``.

    Edges are appended, so running ``link()`` twice over the same tree
    duplicates them.
    """

    def __init__(
        self,
        root: Record,
        resolver: ReferenceResolver,
        *,
        warn_unresolved: Optional[bool] = None,
    ):
        if warn_unresolved is None:
            warn_unresolved = bool(get_config().linking.get("warn_unresolved", False))
        self.root = root
        self.resolver = resolver
        self.warn_unresolved = warn_unresolved

    def link(self) -> LinkReport:
        report = LinkReport()

        for family in self.root.get_children(FAMILY_TAG):
            parents, offspring = self._members(family, report)
            report.families += 1

            for parent in parents:
                parent.add_family(family)
                parent.add_offspring(offspring)
                parent.add_spouses(parents)
                report.child_edges += len(offspring)
                report.spouse_edges += sum(1 for p in parents if p is not parent)

            for child in offspring:
                child.add_family(family)
                child.add_parents(parents)
                report.parent_edges += len(parents)

        log.info(
            "Linked %d families (%d parent, %d child, %d spouse edges; %d skipped references)",
            report.families,
            report.parent_edges,
            report.child_edges,
            report.spouse_edges,
            len(report.skipped),
        )
        return report

    def _members(
        self, family: Record, report: LinkReport
    ) -> Tuple[List[IndividualRecord], List[IndividualRecord]]:
        parents: List[IndividualRecord] = []
        offspring: List[IndividualRecord] = []

        for member in family.iter_children():
            if member.tag in PARENT_ROLES:
                bucket = parents
            elif member.tag in OFFSPRING_ROLES:
                bucket = offspring
            else:
                continue

            individual = self._resolve_member(family, member, report)
            if individual is not None:
                bucket.append(individual)

        return parents, offspring

    def _resolve_member(
        self, family: Record, member: Record, report: LinkReport
    ) -> Optional[IndividualRecord]:
        ref = (member.data or "").strip()

        if not is_reference(ref):
            reason = NOT_A_REFERENCE
        else:
            target = self.resolver.resolve(ref)
            if isinstance(target, IndividualRecord):
                return target
            reason = MISSING if target is None else NOT_INDIVIDUAL

        skipped = SkippedReference(
            family=family.reference,
            role=member.tag,
            reference=member.data,
            reason=reason,
            lineno=member.lineno,
        )
        report.skipped.append(skipped)
        log.debug(
            "Skipping %s %r in family %s (line %d): %s",
            member.tag,
            member.data,
            family.reference,
            member.lineno,
            reason,
        )
        if self.warn_unresolved:
            warnings.warn(
                f"{member.tag} {member.data!r} in family {family.reference} "
                f"(line {member.lineno}) skipped: {reason}",
                UnresolvedReferenceWarning,
                stacklevel=2,
            )
        return None


def link_tree(root: Record, resolver: Optional[ReferenceResolver] = None) -> LinkReport:
    """Index ``root`` (unless a resolver is given) and link every family once."""
    if resolver is None:
        resolver = ReferenceResolver(root)
    return Linker(root, resolver).link()
