from __future__ import annotations

"""Chain rendering helpers (no side-effects).

iter_operations(root) yields (depth, op) depth-first over dependent children.
build_rich_tree(root) returns a Rich *Tree* ready for printing.
"""
from typing import Iterator, List, Tuple

from operette.core.operation import Operation
from operette.utils.constants import STYLE, SYMBOLS

__all__ = [
    "iter_operations",
    "build_rich_tree",
    "describe",
]

_MAX_REPR = 60


# --------------------------------------------------------------------------- #
# Core traverser
# --------------------------------------------------------------------------- #

def iter_operations(root: Operation) -> Iterator[Tuple[int, Operation]]:  # noqa: D401
    """Yield *(depth, op)* for *root* and every operation chained off it (DFS)."""
    stack: List[Tuple[int, Operation]] = [(0, root)]
    while stack:
        depth, op = stack.pop()
        yield depth, op
        # reversed so the first registered child is visited first
        stack.extend((depth + 1, child) for child in reversed(op.children))


def describe(op: Operation) -> str:  # noqa: D401
    """Return a one-line plain-text summary of *op*."""
    state = op.state.value
    if state == "succeeded":
        payload = repr(op.result)
    elif state == "failed":
        payload = repr(op.error)
    else:
        payload = ""
    if len(payload) > _MAX_REPR:
        payload = payload[: _MAX_REPR - 1] + "…"
    return f"{op.label} {state} {payload}".rstrip()


# --------------------------------------------------------------------------- #
# Rich-aware tree builder (import lazily to avoid hard dep at import time)
# --------------------------------------------------------------------------- #

def build_rich_tree(root: Operation, *, icons_on: bool = True):  # noqa: D401 – returns rich Tree
    """Return a *rich.tree.Tree* visualisation of the chain rooted at *root*."""
    from rich.markup import escape
    from rich.tree import Tree  # local import keeps this module lightweight

    def _label(op: Operation) -> str:
        state = op.state.value
        icon = SYMBOLS[state] if icons_on else ""
        text = escape(describe(op))
        return f"{icon}[{STYLE[state]}]{text}[/]"

    tree = Tree(f"[{STYLE['header']}]Operation chain[/]")

    stack = [(tree, root)]
    while stack:
        parent, op = stack.pop()
        node = parent.add(_label(op))
        stack.extend((node, child) for child in reversed(op.children))
    return tree
