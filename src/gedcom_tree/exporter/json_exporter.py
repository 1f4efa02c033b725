"""
json_exporter.py
Structured JSON export of a linked GedcomTree.

Relationship edges are written as reference strings, so the output has
no cycles and can be re-read without the tree.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from gedcom_tree.config import get_config
from gedcom_tree.logging import get_logger
from gedcom_tree.model import IndividualRecord, Record
from gedcom_tree.tags import CHILD_TAG, HUSBAND_TAG, SEX_TAG, WIFE_TAG

if TYPE_CHECKING:
    from gedcom_tree.tree import GedcomTree

log = get_logger("json_exporter")


def _refs(records: List[Record]) -> List[Optional[str]]:
    return [r.reference for r in records]


def _first_data(record: Record, tag: str) -> Optional[str]:
    child = record.first_child(tag)
    return child.data if child is not None else None


def individual_to_dict(individual: IndividualRecord) -> Dict[str, Any]:
    return {
        "reference": individual.reference,
        "name": individual.full_name,
        "display_name": individual.display_name,
        "surname": individual.surname,
        "sex": _first_data(individual, SEX_TAG),
        "location": individual.representative_location(),
        "families": _refs(individual.families),
        "parents": _refs(individual.parents),
        "children": _refs(individual.offspring),
        "spouses": _refs(individual.spouses),
        "lineno": individual.lineno,
    }


def family_to_dict(family: Record) -> Dict[str, Any]:
    return {
        "reference": family.reference,
        "husband": [c.data for c in family.get_children(HUSBAND_TAG)],
        "wife": [c.data for c in family.get_children(WIFE_TAG)],
        "children": [c.data for c in family.get_children(CHILD_TAG)],
        "lineno": family.lineno,
    }


def build_tree_dict(tree: "GedcomTree") -> Dict[str, Any]:
    """
    Convert the tree into a JSON-safe dict.
    """
    individuals = tree.individuals()
    families = tree.families()
    report = tree.link_report

    return {
        "source": str(tree.source) if tree.source else None,
        "counts": {
            "records": len(tree),
            "individuals": len(individuals),
            "families": len(families),
            "parent_edges": report.parent_edges if report else 0,
            "child_edges": report.child_edges if report else 0,
            "spouse_edges": report.spouse_edges if report else 0,
            "skipped_references": len(tree.diagnostics),
        },
        "individuals": [individual_to_dict(i) for i in individuals],
        "families": [family_to_dict(f) for f in families],
        "diagnostics": [asdict(d) for d in tree.diagnostics],
    }


def dumps_tree(tree: "GedcomTree", *, indent: Optional[int] = None) -> str:
    data = build_tree_dict(tree)
    if indent:
        return json.dumps(data, indent=indent, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def export_tree_json(
    tree: "GedcomTree",
    output_path: Union[str, Path],
    *,
    indent: Optional[int] = None,
) -> Path:
    """
    Write the JSON representation of ``tree`` to ``output_path``.

    ``indent`` defaults to ``export.indent`` from the configuration.
    """
    if indent is None:
        indent = int(get_config().export.get("indent", 2))

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_tree(tree, indent=indent), encoding="utf-8")

    log.info("JSON export written to %s", path)
    return path
