"""
gedcom-tree: parse GEDCOM into a record tree and link it into a family graph.

    from gedcom_tree import parse_file

    tree = parse_file("family.ged")
    for person in tree.individuals():
        print(person.full_name, [p.full_name for p in person.parents])
"""

from gedcom_tree.core.exceptions import (
    GedcomTreeError,
    MalformedLineError,
    ParseExecutionError,
    SourceUnavailableError,
    UnresolvedReferenceWarning,
)
from gedcom_tree.model import IndividualRecord, Record
from gedcom_tree.tree import GedcomTree, parse_file, parse_lines, parse_string

__version__ = "0.1.0"

__all__ = [
    "GedcomTree",
    "Record",
    "IndividualRecord",
    "parse_file",
    "parse_lines",
    "parse_string",
    "GedcomTreeError",
    "MalformedLineError",
    "ParseExecutionError",
    "SourceUnavailableError",
    "UnresolvedReferenceWarning",
]
