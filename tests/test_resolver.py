from __future__ import annotations

from gedcom_tree.linking import ReferenceResolver
from gedcom_tree.loader import build_root
from gedcom_tree.model import IndividualRecord


LINES = [
    "0 HEAD",
    "0 @I1@ INDI",
    "1 NAME Anna /Berg/",
    "1 FAMS @F1@",
    "0 @F1@ FAM",
    "1 WIFE @I1@",
    "0 @S1@ SOUR",
    "1 TITL Church book",
]


def test_resolver_indexes_level_zero_identities() -> None:
    root = build_root(LINES)
    resolver = ReferenceResolver(root)

    assert len(resolver) == 3
    assert "@I1@" in resolver
    assert isinstance(resolver.resolve("@I1@"), IndividualRecord)
    assert resolver.resolve("@F1@").tag == "FAM"
    assert resolver.resolve("@S1@") is root.first_child("SOUR")


def test_resolver_returns_none_for_unknown_and_empty() -> None:
    resolver = ReferenceResolver(build_root(LINES))
    assert resolver.resolve("@I404@") is None
    assert resolver.resolve("") is None
    assert resolver.resolve(None) is None


def test_resolve_individual_checks_record_kind() -> None:
    resolver = ReferenceResolver(build_root(LINES))
    assert resolver.resolve_individual("@I1@") is not None
    assert resolver.resolve_individual("@S1@") is None
    assert resolver.resolve_individual("@I404@") is None


def test_pointer_lines_are_not_indexed() -> None:
    root = build_root(["0 @F1@ FAM", "1 @X1@ NOTE nested reference"])
    resolver = ReferenceResolver(root)
    assert resolver.resolve("@X1@") is None


def test_first_duplicate_declaration_wins() -> None:
    root = build_root(["0 @I1@ INDI", "1 NAME First /One/", "0 @I1@ INDI", "1 NAME Second /One/"])
    resolver = ReferenceResolver(root)

    assert resolver.resolve("@I1@").full_name == "First /One/"
    assert len(resolver.duplicates) == 1
    assert resolver.duplicates[0].lineno == 3


def test_each_tree_gets_its_own_index() -> None:
    first = ReferenceResolver(build_root(["0 @I1@ INDI"]))
    second = ReferenceResolver(build_root(["0 @I2@ INDI"]))
    assert "@I2@" not in first
    assert "@I1@" not in second


def test_membership_ignores_surrounding_whitespace() -> None:
    resolver = ReferenceResolver(build_root(LINES))

    assert " @I1@ " in resolver
    assert resolver.resolve(" @I1@ ") is not None
    assert "@I9@" not in resolver
    assert None not in resolver
