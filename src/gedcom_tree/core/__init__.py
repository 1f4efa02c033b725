from gedcom_tree.core.exceptions import (
    GedcomTreeError,
    MalformedLineError,
    ParseExecutionError,
    SourceUnavailableError,
    UnresolvedReferenceWarning,
)

__all__ = [
    "GedcomTreeError",
    "MalformedLineError",
    "ParseExecutionError",
    "SourceUnavailableError",
    "UnresolvedReferenceWarning",
]
