# src/gedcomx_converter/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcomx_converter.loader import load_tree

    tree = load_tree("family.ged")
    for indi in tree.records_by_tag("INDI"):
        ...
"""

from __future__ import annotations

from .tokenizer import GedcomLine, GedcomSyntaxError, read_lines, tokenize_line
from .tree import GedcomNode, GedcomStructureError, GedcomTree, build_tree, load_tree

__all__ = [
    "GedcomLine",
    "GedcomSyntaxError",
    "GedcomNode",
    "GedcomStructureError",
    "GedcomTree",
    "tokenize_line",
    "read_lines",
    "build_tree",
    "load_tree",
]
