# src/gedcom_tree/loader/tree_builder.py

from __future__ import annotations

from typing import Iterable, Optional, Union

from gedcom_tree.config import get_config
from gedcom_tree.core.exceptions import MalformedLineError
from gedcom_tree.logging import get_logger
from gedcom_tree.model import Record, make_root

from .source import LineCursor
from .tokenizer import record_from_token

log = get_logger(__name__)


class TreeBuilder:
    """
    Recursive-descent builder that nests records using only their levels.

    Every line whose level is deeper than the current record's becomes its
    child (after absorbing its own deeper lines); a line at the same or a
    shallower level hands control back to the caller. The synthetic root
    sits at level -1, so every level-0 line ends up directly under it.

    With ``strict_levels`` a line more than one level deeper than its
    parent is rejected instead of being attached.
    """

    def __init__(
        self,
        lines: Union[Iterable[str], LineCursor],
        *,
        strict_levels: Optional[bool] = None,
    ):
        if strict_levels is None:
            strict_levels = bool(get_config().parser.get("strict_levels", True))
        self.cursor = lines if isinstance(lines, LineCursor) else LineCursor(lines)
        self.strict_levels = strict_levels
        self.record_count = 0

    def build(self) -> Record:
        """Consume the whole stream and return the synthetic root."""
        root = make_root()

        first = self.cursor.peek()
        if first is not None and first.level != 0:
            raise MalformedLineError(
                f"Line {first.lineno}: first record must be at level 0, got {first.level} -> {first.raw!r}",
                lineno=first.lineno,
                line=first.raw,
            )

        try:
            self._parse_into(root)
        except RecursionError as exc:
            lineno = self.cursor.lineno
            raise MalformedLineError(
                f"Line {lineno}: records nested too deeply to build",
                lineno=lineno,
            ) from exc
        log.debug("Built tree with %d records", self.record_count)
        return root

    def _parse_into(self, node: Record) -> None:
        while True:
            token = self.cursor.peek()
            if token is None or token.level <= node.level:
                return

            if self.strict_levels and token.level > node.level + 1:
                raise MalformedLineError(
                    f"Line {token.lineno}: level jumped from {node.level} to {token.level} "
                    f"without intermediate parent -> {token.raw!r}",
                    lineno=token.lineno,
                    line=token.raw,
                )

            self.cursor.next()
            child = record_from_token(token)
            self._parse_into(child)
            node.add_child(child)
            child.finalize()
            self.record_count += 1


def build_root(
    lines: Union[Iterable[str], LineCursor],
    *,
    strict_levels: Optional[bool] = None,
) -> Record:
    """
    Build the record tree for a stream of GEDCOM lines.

        lines -> Record(level=-1, tag="ROOT") with level-0 records as children

    An empty stream yields a root without children.
    """
    return TreeBuilder(lines, strict_levels=strict_levels).build()
