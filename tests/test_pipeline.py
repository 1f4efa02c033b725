from __future__ import annotations

import json

import pytest

from gedcom_tree.config import get_config
from gedcom_tree.core.context import ParseContext
from gedcom_tree.core.exceptions import MalformedLineError, SourceUnavailableError
from gedcom_tree.core.pipeline import Pipeline
from gedcom_tree.linking import SkippedReference
from gedcom_tree.logging import get_logger
from conftest import mock_file_path


def _context(input_path, output_path=None) -> ParseContext:
    return ParseContext(
        config=get_config(),
        logger=get_logger("test_pipeline"),
        input_path=str(input_path),
        output_path=str(output_path) if output_path else None,
    )


def test_pipeline_collects_stats_and_exports(tmp_path) -> None:
    out = tmp_path / "export.json"
    ctx = _context(mock_file_path("example.ged"), out)

    tree = Pipeline(ctx).run()

    assert len(tree.individuals()) == 3
    assert ctx.stats["individuals"] == 3
    assert ctx.stats["families"] == 1
    assert ctx.stats["spouse_edges"] == 2
    assert ctx.errors == []
    assert json.loads(out.read_text(encoding="utf-8"))["counts"]["families"] == 1


def test_pipeline_records_skipped_references() -> None:
    ctx = _context(mock_file_path("dangling.ged"))
    Pipeline(ctx).run()

    assert ctx.stats["skipped_references"] == 3
    assert len(ctx.errors) == 3


def test_pipeline_propagates_malformed_input() -> None:
    with pytest.raises(MalformedLineError):
        Pipeline(_context(mock_file_path("malformed.ged"))).run()


def test_pipeline_propagates_missing_source(tmp_path) -> None:
    with pytest.raises(SourceUnavailableError):
        Pipeline(_context(tmp_path / "missing.ged")).run()


def test_context_strict_levels_overrides_config(tmp_path) -> None:
    path = tmp_path / "jump.ged"
    path.write_text("0 @I1@ INDI\n2 DATE 1 JAN 1900\n0 TRLR\n", encoding="utf-8")

    with pytest.raises(MalformedLineError):
        Pipeline(_context(path)).run()

    ctx = _context(path)
    ctx.strict_levels = False
    tree = Pipeline(ctx).run()

    assert ctx.stats["records"] == 2
    assert tree.find_by_reference("@I1@").first_child("DATE").data == "1 JAN 1900"


def test_skipped_references_are_typed() -> None:
    ctx = _context(mock_file_path("dangling.ged"))
    Pipeline(ctx).run()

    assert all(isinstance(skip, SkippedReference) for skip in ctx.errors)
    assert {skip.family for skip in ctx.errors} == {"@F1@"}
