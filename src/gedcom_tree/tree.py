# src/gedcom_tree/tree.py

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from gedcom_tree.exporter.gedcom_writer import write_gedcom
from gedcom_tree.linking import Linker, LinkReport, ReferenceResolver, SkippedReference
from gedcom_tree.loader import build_root, read_lines
from gedcom_tree.logging import get_logger
from gedcom_tree.model import IndividualRecord, Record
from gedcom_tree.tags import FAMILY_TAG, INDIVIDUAL_TAG

log = get_logger(__name__)


class GedcomTree:
    """
    A parsed GEDCOM file: the record tree, its reference index and, once
    linked, the relationship edges between individuals.

    Each instance owns its own root and resolver; nothing is shared between
    parses.

    Attributes:
        root: Synthetic level -1 record holding every level-0 record.
        resolver: Reference index built over ``root``.
        source: Path of the parsed file, when there is one.
    """

    def __init__(self, root: Record, *, source: Optional[Path] = None):
        self.root = root
        self.source = source
        self.resolver = ReferenceResolver(root)
        self._link_report: Optional[LinkReport] = None

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return sum(1 for _ in self.root.iter_children())

    def __iter__(self) -> Iterator[Record]:
        return self.root.iter_children()

    def iter_records(self) -> Iterator[Record]:
        """Every record in the tree, depth-first, without the root."""
        for record in self.root.iter_children():
            yield from record.iter_subtree()

    # ------------------------------------------------------------------ #
    # Query API
    # ------------------------------------------------------------------ #

    def get_nodes(self, tag: str) -> List[Record]:
        """Level-0 records with the given tag, in input order."""
        return self.root.get_children(tag)

    def individuals(self) -> List[IndividualRecord]:
        return [r for r in self.get_nodes(INDIVIDUAL_TAG) if isinstance(r, IndividualRecord)]

    def families(self) -> List[Record]:
        return self.get_nodes(FAMILY_TAG)

    def find_by_reference(self, reference: str) -> Optional[Record]:
        """Return the level-0 record declaring ``reference``, if any."""
        return self.resolver.resolve(reference)

    def surname_roots(self) -> List[IndividualRecord]:
        """Distinct surname roots of all individuals, in first-seen order."""
        roots: List[IndividualRecord] = []
        seen = set()
        for individual in self.individuals():
            root = individual.surname_root()
            if id(root) not in seen:
                seen.add(id(root))
                roots.append(root)
        return roots

    # ------------------------------------------------------------------ #
    # Linking
    # ------------------------------------------------------------------ #

    @property
    def linked(self) -> bool:
        return self._link_report is not None

    @property
    def link_report(self) -> Optional[LinkReport]:
        return self._link_report

    @property
    def diagnostics(self) -> List[SkippedReference]:
        """Family member references skipped while linking."""
        return list(self._link_report.skipped) if self._link_report else []

    def link(self, *, warn_unresolved: Optional[bool] = None) -> LinkReport:
        """
        Wire individuals to their families, parents, offspring and spouses.

        Linking happens once per tree; later calls return the first report.
        """
        if self._link_report is not None:
            log.warning("Tree already linked; keeping the existing edges")
            return self._link_report

        self._link_report = Linker(self.root, self.resolver, warn_unresolved=warn_unresolved).link()
        return self._link_report

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def to_gedcom(self) -> str:
        return write_gedcom(self.root)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GedcomTree records={len(self)} linked={self.linked}>"


def parse_lines(
    lines: Iterable[str],
    *,
    link: bool = True,
    strict_levels: Optional[bool] = None,
    source: Optional[Path] = None,
) -> GedcomTree:
    """
    Parse GEDCOM lines into a GedcomTree, linking it unless ``link=False``.

    Raises:
        MalformedLineError: a line could not be parsed or broke the
            level structure.
    """
    root = build_root(lines, strict_levels=strict_levels)
    tree = GedcomTree(root, source=source)
    log.info(
        "Parsed %d top-level records (%d individuals, %d families)",
        len(tree),
        len(tree.individuals()),
        len(tree.families()),
    )
    if link:
        tree.link()
    return tree


def parse_string(text: str, **kwargs) -> GedcomTree:
    return parse_lines(text.split("\n"), **kwargs)


def parse_file(path: Union[str, Path], **kwargs) -> GedcomTree:
    """
    Read and parse a GEDCOM file.

    Raises:
        SourceUnavailableError: the file is missing or unreadable.
        MalformedLineError: see ``parse_lines``.
    """
    lines = read_lines(path)
    return parse_lines(lines, source=Path(path), **kwargs)
