from __future__ import annotations

import warnings

import pytest

from gedcom_tree import parse_lines, parse_string
from gedcom_tree.core.exceptions import UnresolvedReferenceWarning
from gedcom_tree.linking import (
    MISSING,
    NOT_A_REFERENCE,
    NOT_INDIVIDUAL,
    Linker,
    ReferenceResolver,
    link_tree,
)
from gedcom_tree.loader import build_root


def test_three_person_family_scenario(family_lines) -> None:
    tree = parse_lines(family_lines)
    i1, i2, i3 = (tree.find_by_reference(r) for r in ("@I1@", "@I2@", "@I3@"))
    family = tree.find_by_reference("@F1@")

    assert len(tree.get_nodes("INDI")) == 3
    assert i3.parents == [i1, i2]
    assert i1.spouses == [i2]
    assert i2.spouses == [i1]
    assert i1.offspring == [i3]
    assert i2.offspring == [i3]
    assert i1.families == [family]
    assert i3.families == [family]
    assert i3.offspring == []
    assert i3.spouses == []


def test_nobody_is_their_own_spouse(family_lines) -> None:
    tree = parse_lines(family_lines)
    for person in tree.individuals():
        assert all(spouse is not person for spouse in person.spouses)


def test_parents_follow_input_order() -> None:
    tree = parse_string(
        "0 @I1@ INDI\n0 @I2@ INDI\n0 @I3@ INDI\n"
        "0 @F1@ FAM\n1 WIFE @I2@\n1 CHIL @I3@\n1 HUSB @I1@\n"
    )
    i1, i2, i3 = tree.individuals()
    assert i3.parents == [i2, i1]


def test_multiple_children_and_families() -> None:
    tree = parse_string(
        "0 @I1@ INDI\n0 @I2@ INDI\n0 @I3@ INDI\n0 @I4@ INDI\n0 @I5@ INDI\n"
        "0 @F1@ FAM\n1 HUSB @I1@\n1 WIFE @I2@\n1 CHIL @I3@\n1 CHIL @I4@\n"
        "0 @F2@ FAM\n1 HUSB @I1@\n1 WIFE @I5@\n"
    )
    i1, i2, i3, i4, i5 = tree.individuals()

    assert i1.offspring == [i3, i4]
    assert i1.spouses == [i2, i5]
    assert [f.reference for f in i1.families] == ["@F1@", "@F2@"]
    assert i4.parents == [i1, i2]
    assert i5.offspring == []

    report = tree.link_report
    assert report.families == 2
    assert report.child_edges == 4
    assert report.parent_edges == 4
    assert report.spouse_edges == 4


def test_dangling_references_are_skipped() -> None:
    tree = parse_string(
        "0 @I1@ INDI\n0 @I2@ INDI\n0 @S1@ SOUR\n"
        "0 @F1@ FAM\n1 HUSB @I2@\n1 WIFE @I404@\n1 CHIL @I1@\n1 CHIL @S1@\n1 CHIL unknown\n"
    )
    i1, i2 = tree.individuals()

    assert i1.parents == [i2]
    assert i2.offspring == [i1]
    assert i2.spouses == []

    reasons = [(d.reference, d.reason) for d in tree.diagnostics]
    assert reasons == [
        ("@I404@", MISSING),
        ("@S1@", NOT_INDIVIDUAL),
        ("unknown", NOT_A_REFERENCE),
    ]
    assert tree.diagnostics[0].family == "@F1@"
    assert tree.diagnostics[0].role == "WIFE"
    assert tree.diagnostics[0].lineno == 6


def test_family_with_only_unresolved_members_links_nothing() -> None:
    tree = parse_string("0 @F1@ FAM\n1 HUSB @I1@\n1 CHIL @I2@\n")
    assert tree.link_report.families == 1
    assert len(tree.diagnostics) == 2


def test_warn_unresolved_emits_warnings() -> None:
    root = build_root(["0 @F1@ FAM", "1 CHIL @I9@"])
    linker = Linker(root, ReferenceResolver(root), warn_unresolved=True)

    with pytest.warns(UnresolvedReferenceWarning, match="@I9@"):
        linker.link()


def test_unresolved_references_are_silent_by_default() -> None:
    root = build_root(["0 @F1@ FAM", "1 CHIL @I9@"])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        report = Linker(root, ReferenceResolver(root), warn_unresolved=False).link()
    assert len(report.skipped) == 1


def test_linker_run_twice_duplicates_edges(family_lines) -> None:
    root = build_root(family_lines)
    resolver = ReferenceResolver(root)
    Linker(root, resolver).link()
    Linker(root, resolver).link()

    child = resolver.resolve("@I3@")
    assert len(child.parents) == 4


def test_tree_link_runs_once(family_lines) -> None:
    tree = parse_lines(family_lines)
    first = tree.link_report
    assert tree.link() is first

    child = tree.find_by_reference("@I3@")
    assert len(child.parents) == 2


def test_link_tree_helper(family_lines) -> None:
    root = build_root(family_lines)
    report = link_tree(root)
    assert report.families == 1
    assert report.skipped == []
