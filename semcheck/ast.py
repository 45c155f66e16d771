"""Abstract syntax tree nodes and their textual renderings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Node:
    """A tree node: an optional label and an ordered list of children."""

    name: str | None
    children: list[Node | None] = field(default_factory=list)

    @property
    def child_count(self) -> int:
        return len(self.children)


def make_node(name: str | None, *args: Node | None) -> Node:
    """Build a node labelled ``name`` whose children are ``args`` in order."""
    return Node(name, list(args))


def _ast_parts(node: Node | None, indent: int) -> Iterator[str]:
    if node is None:
        return
    pad = " " * indent
    yield pad
    if node.name is not None:
        yield f"({node.name}\n"
    for child in node.children:
        yield from _ast_parts(child, indent + 2)
    if node.name is not None:
        yield f"{pad})\n"


def _debug_parts(node: Node | None, depth: int) -> Iterator[str]:
    if node is None:
        return
    label = node.name if node.name is not None else "(null)"
    yield f"{'  ' * depth}{label}\n"
    for child in node.children:
        yield from _debug_parts(child, depth + 1)


def format_ast(node: Node | None, indent: int = 0) -> str:
    """Render the tree as nested parenthesised labels, two spaces per level."""
    return "".join(_ast_parts(node, indent))


def format_ast_debug(node: Node | None, depth: int = 0) -> str:
    """Render one label per line, indented two spaces per level of depth."""
    return "".join(_debug_parts(node, depth))


def print_ast(node: Node | None, indent: int = 0) -> None:
    """Write :func:`format_ast` output to standard output."""
    print(format_ast(node, indent), end="")


def print_ast_debug(node: Node | None, depth: int = 0) -> None:
    """Write :func:`format_ast_debug` output to standard output."""
    print(format_ast_debug(node, depth), end="")