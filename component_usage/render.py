from __future__ import annotations

import os
from typing import List, Optional

from .model import CIRCULAR_REFERENCE, HierarchyNode


CORNER = "└── "
TEE = "├── "
PIPE = "│   "
BLANK = "    "


def _label(node: HierarchyNode, relative_to: Optional[str]) -> str:
    if node.circular:
        return f"{node.name} ({CIRCULAR_REFERENCE})"
    label = node.name
    if node.defined_in:
        path = node.defined_in
        if relative_to:
            path = os.path.relpath(path, relative_to).replace(os.sep, "/")
        label += f" ({path})"
    if node.truncated:
        label += " …"
    return label


def format_tree(tree: HierarchyNode, relative_to: Optional[str] = None) -> str:
    lines: List[str] = []
    # (node, prefix, is_last)
    stack = [(tree, "", True)]
    while stack:
        node, prefix, is_last = stack.pop()
        lines.append(f"{prefix}{CORNER if is_last else TEE}{_label(node, relative_to)}")
        child_prefix = prefix + (BLANK if is_last else PIPE)
        last = len(node.children) - 1
        for i in reversed(range(len(node.children))):
            stack.append((node.children[i], child_prefix, i == last))
    return "\n".join(lines)


def format_path_list(tree: HierarchyNode) -> str:
    """One "- A -> B -> C" line per root-to-leaf path."""
    lines: List[str] = []
    stack = [(tree, [tree.name])]
    while stack:
        node, path = stack.pop()
        if not node.children:
            if node.circular:
                path = path[:-1] + [f"{node.name} ({CIRCULAR_REFERENCE})"]
            lines.append("- " + " -> ".join(path))
            continue
        for child in reversed(node.children):
            stack.append((child, path + [child.name]))
    return "\n".join(lines)
