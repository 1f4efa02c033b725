from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

import typer
from rich.console import Console

from gedcom_tree.config import get_config
from gedcom_tree.core.context import ParseContext
from gedcom_tree.core.exceptions import GedcomTreeError
from gedcom_tree.core.pipeline import Pipeline
from gedcom_tree.logging import get_logger, set_debug
from gedcom_tree.logging.logger import BASE_LOGGER_NAME
from gedcom_tree.tree import GedcomTree

console = Console()
err_console = Console(stderr=True)

log = get_logger("cli")


@contextmanager
def abort_on_error() -> Iterator[None]:
    """Turn fatal parse errors into a one-line message and exit code 1."""
    try:
        yield
    except GedcomTreeError as exc:
        err_console.print(f"[red][ERROR][/red] {exc}", markup=True, highlight=False)
        raise typer.Exit(code=1) from exc


def load_gedcom(path: Path, *, verbose: bool = False) -> Tuple[GedcomTree, Dict[str, Any]]:
    """
    Run the read -> build -> link pipeline for one file.
    """
    ctx = ParseContext(
        config=get_config(),
        logger=log,
        input_path=str(path),
    )

    was_debug = logging.getLogger(BASE_LOGGER_NAME).level == logging.DEBUG
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()
    try:
        tree = Pipeline(ctx).run()
    finally:
        if verbose:
            set_debug(was_debug)
    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return tree, ctx.stats


def write_output(payload: str, *, out: Optional[Path]) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
