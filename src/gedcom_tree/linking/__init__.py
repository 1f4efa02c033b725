"""
Reference resolution and relationship linking.

    from gedcom_tree.linking import ReferenceResolver, Linker, link_tree
"""

from __future__ import annotations

from .resolver import ReferenceResolver
from .linker import (
    MISSING,
    NOT_A_REFERENCE,
    NOT_INDIVIDUAL,
    LinkReport,
    Linker,
    SkippedReference,
    link_tree,
)

__all__ = [
    "ReferenceResolver",
    "Linker",
    "LinkReport",
    "SkippedReference",
    "link_tree",
    "MISSING",
    "NOT_INDIVIDUAL",
    "NOT_A_REFERENCE",
]
