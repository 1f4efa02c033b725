# src/gedcom_tree/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_tree.loader import (
        Token,
        tokenize_line,
        parse_line,
        read_lines,
        LineCursor,
        TreeBuilder,
        build_root,
    )
"""

from __future__ import annotations

from .tokenizer import Token, parse_line, record_from_token, rest_from_token, tokenize_line
from .source import LineCursor, read_lines, resolve_input_path
from .tree_builder import TreeBuilder, build_root

__all__ = [
    "Token",
    "tokenize_line",
    "parse_line",
    "record_from_token",
    "rest_from_token",
    "LineCursor",
    "read_lines",
    "resolve_input_path",
    "TreeBuilder",
    "build_root",
]
