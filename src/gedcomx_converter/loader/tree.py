# src/gedcomx_converter/loader/tree.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .tokenizer import GedcomLine, read_lines


class GedcomStructureError(Exception):
    """Raised when line levels do not nest properly."""


@dataclass
class GedcomNode:
    """
    A GEDCOM line together with its subordinate lines.

    CONC/CONT children never appear here: ``build_tree`` folds them into
    ``value``.
    """

    tag: str
    value: str = ""
    pointer: Optional[str] = None
    level: int = 0
    lineno: int = 0
    children: List["GedcomNode"] = field(default_factory=list)

    def find_children(self, tag: str) -> List["GedcomNode"]:
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["GedcomNode"]:
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def first_value(self, *tags: str) -> Optional[str]:
        """Value of the first child carrying any of ``tags``, or None."""
        for c in self.children:
            if c.tag in tags:
                return c.value
        return None

    def iter_subtree(self) -> Iterator["GedcomNode"]:
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GedcomNode {self.level}{ptr} {self.tag}: {self.value!r}>"


@dataclass
class GedcomTree:
    """Level-0 records of one GEDCOM file, in file order."""

    records: List[GedcomNode]
    _by_pointer: Dict[str, GedcomNode] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_pointer = {r.pointer: r for r in self.records if r.pointer}

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GedcomNode]:
        return iter(self.records)

    def records_by_tag(self, tag: str) -> List[GedcomNode]:
        t = tag.upper()
        return [r for r in self.records if r.tag == t]

    def find_by_pointer(self, pointer: str) -> Optional[GedcomNode]:
        return self._by_pointer.get(pointer)


def _append_continuation(node: GedcomNode, line: GedcomLine) -> None:
    if line.tag == "CONT":
        node.value = f"{node.value}\n{line.value}"
    else:
        node.value = f"{node.value}{line.value}"


def build_tree(lines: Iterable[GedcomLine]) -> GedcomTree:
    """
    Nest a flat line stream into records.

    A line at level N attaches to the most recent line at level N-1; a
    jump of more than one level raises GedcomStructureError.
    """
    records: List[GedcomNode] = []
    stack: List[GedcomNode] = []

    for line in lines:
        if line.level > len(stack):
            raise GedcomStructureError(
                f"Line {line.lineno}: level {line.level} has no parent at level {line.level - 1}"
            )

        if line.tag in ("CONC", "CONT") and line.level > 0:
            _append_continuation(stack[line.level - 1], line)
            continue

        node = GedcomNode(
            tag=line.tag,
            value=line.value,
            pointer=line.pointer,
            level=line.level,
            lineno=line.lineno,
        )
        del stack[line.level:]
        if line.level == 0:
            records.append(node)
        else:
            stack[-1].children.append(node)
        stack.append(node)

    return GedcomTree(records=records)


def load_tree(path: Union[str, Path]) -> GedcomTree:
    """Read and nest a GEDCOM file in one step."""
    return build_tree(read_lines(path))
