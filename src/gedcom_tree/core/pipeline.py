from __future__ import annotations

from gedcom_tree.core.context import ParseContext
from gedcom_tree.core.exceptions import GedcomTreeError, ParseExecutionError
from gedcom_tree.exporter import export_tree_json
from gedcom_tree.tree import GedcomTree, parse_file


class Pipeline:
    """
    Orchestrates read -> build -> index -> link -> (optional) JSON export.
    No parsing logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> GedcomTree:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            strict = self.ctx.resolve_strict_levels()
            tree = parse_file(self.ctx.input_path, strict_levels=strict)

            report = tree.link_report
            self.ctx.stats.update(
                {
                    "records": len(tree),
                    "individuals": len(tree.individuals()),
                    "families": len(tree.families()),
                    "parent_edges": report.parent_edges,
                    "child_edges": report.child_edges,
                    "spouse_edges": report.spouse_edges,
                    "skipped_references": len(report.skipped),
                    "duplicate_references": len(tree.resolver.duplicates),
                }
            )
            self.ctx.errors.extend(report.skipped)

            if self.ctx.output_path:
                export_tree_json(tree, self.ctx.output_path)

            self.log.info("Pipeline completed successfully")
            return tree

        except GedcomTreeError as exc:
            self.log.error("Pipeline aborted: %s", exc)
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc
